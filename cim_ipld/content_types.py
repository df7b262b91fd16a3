"""Typed wrappers for common file formats, with magic-byte verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional

__all__ = [
    "InvalidContentError",
    "Codec",
    "DocumentMetadata",
    "ImageMetadata",
    "AudioMetadata",
    "VideoMetadata",
    "PdfDocument",
    "DocxDocument",
    "MarkdownDocument",
    "TextDocument",
    "JpegImage",
    "PngImage",
    "GifImage",
    "WebPImage",
    "Mp3Audio",
    "WavAudio",
    "FlacAudio",
    "AacAudio",
    "OggAudio",
    "Mp4Video",
    "MovVideo",
    "MkvVideo",
    "AviVideo",
    "detect_content_type",
    "content_type_name",
]

_PDF = b"%PDF-"
_ZIP = b"PK\x03\x04"
_PNG = b"\x89PNG\r\n\x1a\n"
_JPEG = b"\xff\xd8\xff"
_GIF = b"GIF8"
_RIFF = b"RIFF"
_MP3_ID3 = b"ID3"
_MP3_SYNC = b"\xff\xfb"
_FLAC = b"fLaC"
_OGG = b"OggS"
_AAC_ADTS = b"\xff\xf1"
_MKV = b"\x1a\x45\xdf\xa3"


class InvalidContentError(ValueError):
    """Raised when data does not match the format it claims to be."""


class Codec(IntEnum):
    """Content type codes for each supported file format."""

    # Documents (0x600000 - 0x60FFFF)
    PDF = 0x600001
    DOCX = 0x600002
    MARKDOWN = 0x600003
    TEXT = 0x600004
    # Images (0x610000 - 0x61FFFF)
    JPEG = 0x610001
    PNG = 0x610002
    GIF = 0x610003
    WEBP = 0x610004
    # Audio (0x620000 - 0x62FFFF)
    MP3 = 0x620001
    WAV = 0x620002
    FLAC = 0x620003
    AAC = 0x620004
    OGG = 0x620005
    # Video (0x630000 - 0x63FFFF)
    MP4 = 0x630001
    MOV = 0x630002
    MKV = 0x630003
    AVI = 0x630004


_NAMES = {
    Codec.PDF: "PDF Document",
    Codec.DOCX: "DOCX Document",
    Codec.MARKDOWN: "Markdown Document",
    Codec.TEXT: "Text Document",
    Codec.JPEG: "JPEG Image",
    Codec.PNG: "PNG Image",
    Codec.GIF: "GIF Image",
    Codec.WEBP: "WebP Image",
    Codec.MP3: "MP3 Audio",
    Codec.WAV: "WAV Audio",
    Codec.FLAC: "FLAC Audio",
    Codec.AAC: "AAC Audio",
    Codec.OGG: "OGG Audio",
    Codec.MP4: "MP4 Video",
    Codec.MOV: "MOV Video",
    Codec.MKV: "MKV Video",
    Codec.AVI: "AVI Video",
}


@dataclass
class DocumentMetadata:
    title: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[int] = None
    modified_at: Optional[int] = None
    tags: list[str] = field(default_factory=list)
    language: Optional[str] = None


@dataclass
class ImageMetadata:
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    color_space: Optional[str] = None
    compression: Optional[str] = None
    tags: list[str] = field(default_factory=list)


@dataclass
class AudioMetadata:
    duration_ms: Optional[int] = None
    bitrate: Optional[int] = None
    sample_rate: Optional[int] = None
    channels: Optional[int] = None
    codec: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    title: Optional[str] = None
    year: Optional[int] = None
    tags: list[str] = field(default_factory=list)


@dataclass
class VideoMetadata:
    duration_ms: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    frame_rate: Optional[float] = None
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    bitrate: Optional[int] = None
    tags: list[str] = field(default_factory=list)


def _riff_of(data: bytes, form: bytes) -> bool:
    return data.startswith(_RIFF) and len(data) > 12 and data[8:12] == form


class _Verified:
    """Mixin that checks ``data`` against the class's ``verify`` on creation."""

    CODEC: ClassVar[Codec]
    _LABEL: ClassVar[str]
    data: bytes

    @staticmethod
    def verify(data: bytes) -> bool:  # pragma: no cover - overridden
        raise NotImplementedError

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if not self.verify(self.data):
            raise InvalidContentError(f"Not a valid {self._LABEL} file")


@dataclass
class _BinaryDocument(_Verified):
    data: bytes
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


@dataclass
class _Image(_Verified):
    data: bytes
    metadata: ImageMetadata = field(default_factory=ImageMetadata)


@dataclass
class _Audio(_Verified):
    data: bytes
    metadata: AudioMetadata = field(default_factory=AudioMetadata)


@dataclass
class _Video(_Verified):
    data: bytes
    metadata: VideoMetadata = field(default_factory=VideoMetadata)


# Documents


@dataclass
class PdfDocument(_BinaryDocument):
    CODEC: ClassVar[Codec] = Codec.PDF
    _LABEL: ClassVar[str] = "PDF"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_PDF)


@dataclass
class DocxDocument(_BinaryDocument):
    CODEC: ClassVar[Codec] = Codec.DOCX
    _LABEL: ClassVar[str] = "DOCX"

    @staticmethod
    def verify(data: bytes) -> bool:
        # DOCX files are ZIP archives.
        return bytes(data).startswith(_ZIP)


@dataclass
class MarkdownDocument:
    content: str
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    CODEC: ClassVar[Codec] = Codec.MARKDOWN

    @classmethod
    def from_bytes(cls, data: bytes, metadata: Optional[DocumentMetadata] = None) -> "MarkdownDocument":
        """Build from UTF-8 bytes."""
        try:
            content = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidContentError("Invalid UTF-8 in markdown") from None
        return cls(content, metadata if metadata is not None else DocumentMetadata())


@dataclass
class TextDocument:
    content: str
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    CODEC: ClassVar[Codec] = Codec.TEXT

    @classmethod
    def from_bytes(cls, data: bytes, metadata: Optional[DocumentMetadata] = None) -> "TextDocument":
        """Build from UTF-8 bytes."""
        try:
            content = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidContentError("Invalid UTF-8 in text") from None
        return cls(content, metadata if metadata is not None else DocumentMetadata())


# Images


@dataclass
class JpegImage(_Image):
    CODEC: ClassVar[Codec] = Codec.JPEG
    _LABEL: ClassVar[str] = "JPEG"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_JPEG)


@dataclass
class PngImage(_Image):
    CODEC: ClassVar[Codec] = Codec.PNG
    _LABEL: ClassVar[str] = "PNG"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_PNG)


@dataclass
class GifImage(_Image):
    CODEC: ClassVar[Codec] = Codec.GIF
    _LABEL: ClassVar[str] = "GIF"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_GIF)


@dataclass
class WebPImage(_Image):
    CODEC: ClassVar[Codec] = Codec.WEBP
    _LABEL: ClassVar[str] = "WebP"

    @staticmethod
    def verify(data: bytes) -> bool:
        return _riff_of(bytes(data), b"WEBP")


# Audio


@dataclass
class Mp3Audio(_Audio):
    CODEC: ClassVar[Codec] = Codec.MP3
    _LABEL: ClassVar[str] = "MP3"

    @staticmethod
    def verify(data: bytes) -> bool:
        data = bytes(data)
        return data.startswith(_MP3_ID3) or data.startswith(_MP3_SYNC)


@dataclass
class WavAudio(_Audio):
    CODEC: ClassVar[Codec] = Codec.WAV
    _LABEL: ClassVar[str] = "WAV"

    @staticmethod
    def verify(data: bytes) -> bool:
        return _riff_of(bytes(data), b"WAVE")


@dataclass
class FlacAudio(_Audio):
    CODEC: ClassVar[Codec] = Codec.FLAC
    _LABEL: ClassVar[str] = "FLAC"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_FLAC)


@dataclass
class AacAudio(_Audio):
    CODEC: ClassVar[Codec] = Codec.AAC
    _LABEL: ClassVar[str] = "AAC"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_AAC_ADTS)


@dataclass
class OggAudio(_Audio):
    CODEC: ClassVar[Codec] = Codec.OGG
    _LABEL: ClassVar[str] = "OGG"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_OGG)


# Video


@dataclass
class Mp4Video(_Video):
    CODEC: ClassVar[Codec] = Codec.MP4
    _LABEL: ClassVar[str] = "MP4"

    @staticmethod
    def verify(data: bytes) -> bool:
        data = bytes(data)
        return len(data) >= 8 and data[4:8] == b"ftyp"


@dataclass
class MovVideo(_Video):
    CODEC: ClassVar[Codec] = Codec.MOV
    _LABEL: ClassVar[str] = "MOV"

    @staticmethod
    def verify(data: bytes) -> bool:
        data = bytes(data)
        return len(data) >= 12 and data[4:8] == b"ftyp" and data[8:12] == b"qt  "


@dataclass
class MkvVideo(_Video):
    CODEC: ClassVar[Codec] = Codec.MKV
    _LABEL: ClassVar[str] = "MKV"

    @staticmethod
    def verify(data: bytes) -> bool:
        return bytes(data).startswith(_MKV)


@dataclass
class AviVideo(_Video):
    CODEC: ClassVar[Codec] = Codec.AVI
    _LABEL: ClassVar[str] = "AVI"

    @staticmethod
    def verify(data: bytes) -> bool:
        return _riff_of(bytes(data), b"AVI ")


def detect_content_type(data: bytes) -> Optional[Codec]:
    """Guess the format of ``data`` from its leading bytes, or return None."""
    data = bytes(data)

    if data.startswith(_PDF):
        return Codec.PDF
    if data.startswith(_ZIP):
        return Codec.DOCX

    if data.startswith(_PNG):
        return Codec.PNG
    if data.startswith(_JPEG):
        return Codec.JPEG
    if data.startswith(_GIF):
        return Codec.GIF
    if _riff_of(data, b"WEBP"):
        return Codec.WEBP

    if data.startswith(_MP3_ID3) or data.startswith(_MP3_SYNC):
        return Codec.MP3
    if _riff_of(data, b"WAVE"):
        return Codec.WAV
    if data.startswith(_FLAC):
        return Codec.FLAC
    if data.startswith(_AAC_ADTS):
        return Codec.AAC
    if data.startswith(_OGG):
        return Codec.OGG

    if len(data) > 12 and data[4:8] == b"ftyp":
        return Codec.MOV if data[8:12] == b"qt  " else Codec.MP4
    if data.startswith(_MKV):
        return Codec.MKV
    if _riff_of(data, b"AVI "):
        return Codec.AVI

    return None


def content_type_name(content_type: int) -> str:
    """Human-readable name for a content type code, or "Unknown"."""
    try:
        return _NAMES[Codec(content_type)]
    except (ValueError, TypeError):
        return "Unknown"