import pytest

from cim_ipld.content_types import (
    AacAudio,
    AudioMetadata,
    AviVideo,
    Codec,
    DocumentMetadata,
    DocxDocument,
    FlacAudio,
    GifImage,
    ImageMetadata,
    InvalidContentError,
    JpegImage,
    MarkdownDocument,
    MkvVideo,
    MovVideo,
    Mp3Audio,
    Mp4Video,
    OggAudio,
    PdfDocument,
    PngImage,
    TextDocument,
    VideoMetadata,
    WavAudio,
    WebPImage,
    content_type_name,
    detect_content_type,
)


def test_pdf_verification():
    assert PdfDocument.verify(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3")
    assert not PdfDocument.verify(b"Not a PDF")


def test_image_detection():
    assert detect_content_type(b"\x89PNG\r\n\x1a\nsome data") == Codec.PNG
    assert detect_content_type(b"\xff\xd8\xff\xe0some jpeg data") == Codec.JPEG


def test_content_type_names():
    assert content_type_name(Codec.PDF) == "PDF Document"
    assert content_type_name(Codec.MP3) == "MP3 Audio"
    assert content_type_name(Codec.MP4) == "MP4 Video"


def test_content_type_name_unknown():
    assert content_type_name(0x12345) == "Unknown"
    assert content_type_name(0x600001) == "PDF Document"


def test_codec_values():
    assert detect_content_type(b"%PDF-1.4") == 0x600001
    assert detect_content_type(b"OggS\x00") == 0x620005
    assert detect_content_type(b"RIFF\x00\x00\x00\x00AVI LIST") == 0x630004
    assert content_type_name(0x620005) == "OGG Audio"
    assert content_type_name(0x630004) == "AVI Video"


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"%PDF-1.7 body", Codec.PDF),
        (b"PK\x03\x04rest", Codec.DOCX),
        (b"GIF89a....", Codec.GIF),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", Codec.WEBP),
        (b"ID3\x03\x00", Codec.MP3),
        (b"\xff\xfb\x90\x00", Codec.MP3),
        (b"RIFF\x00\x00\x00\x00WAVEfmt ", Codec.WAV),
        (b"fLaC\x00\x00", Codec.FLAC),
        (b"\xff\xf1\x50\x80", Codec.AAC),
        (b"OggS\x00\x02", Codec.OGG),
        (b"\x00\x00\x00\x20ftypisom\x00", Codec.MP4),
        (b"\x00\x00\x00\x14ftypqt  \x00", Codec.MOV),
        (b"\x1a\x45\xdf\xa3\x01", Codec.MKV),
        (b"RIFF\x00\x00\x00\x00AVI LIST", Codec.AVI),
    ],
)
def test_detect_formats(data, expected):
    assert detect_content_type(data) == expected


def test_detect_unknown_and_short_riff():
    assert detect_content_type(b"hello world") is None
    assert detect_content_type(b"") is None
    # RIFF header with exactly 12 bytes is not long enough
    assert detect_content_type(b"RIFF\x00\x00\x00\x00WEBP") is None
    # ftyp box needs more than 12 bytes for detection
    assert detect_content_type(b"\x00\x00\x00\x20ftypisom") is None


def test_pdf_construction_and_rejection():
    doc = PdfDocument(b"%PDF-1.4", DocumentMetadata(title="Report"))
    assert doc.data == b"%PDF-1.4"
    assert doc.metadata.title == "Report"
    assert doc.CODEC == Codec.PDF
    with pytest.raises(InvalidContentError, match="Not a valid PDF file"):
        PdfDocument(b"nope", DocumentMetadata())


def test_docx_verification():
    assert DocxDocument.verify(b"PK\x03\x04abc")
    assert not DocxDocument.verify(b"PK\x05\x06")
    with pytest.raises(InvalidContentError, match="DOCX"):
        DocxDocument(b"plain")


def test_markdown_from_bytes():
    doc = MarkdownDocument.from_bytes(b"# Title", DocumentMetadata())
    assert doc.content == "# Title"
    assert doc.CODEC == Codec.MARKDOWN
    with pytest.raises(InvalidContentError, match="Invalid UTF-8 in markdown"):
        MarkdownDocument.from_bytes(b"\xff\xfe\xfd", DocumentMetadata())


def test_text_from_bytes():
    doc = TextDocument.from_bytes("héllo".encode("utf-8"), DocumentMetadata(tags=["a"]))
    assert doc.content == "héllo"
    assert doc.metadata.tags == ["a"]
    with pytest.raises(InvalidContentError, match="Invalid UTF-8 in text"):
        TextDocument.from_bytes(b"\xc3\x28", DocumentMetadata())


def test_image_verifiers():
    assert JpegImage.verify(b"\xff\xd8\xff\xdb")
    assert not JpegImage.verify(b"\xff\xd8")
    assert PngImage.verify(b"\x89PNG\r\n\x1a\n")
    assert not PngImage.verify(b"\x89PNG")
    assert GifImage.verify(b"GIF87a")
    assert WebPImage.verify(b"RIFF\x00\x00\x00\x00WEBPx")
    assert not WebPImage.verify(b"RIFF\x00\x00\x00\x00WEBP")
    assert not WebPImage.verify(b"RIFF\x00\x00\x00\x00WAVEx")


def test_image_construction():
    img = PngImage(b"\x89PNG\r\n\x1a\nrest", ImageMetadata(width=4, height=3))
    assert img.metadata.width == 4
    assert img.CODEC == Codec.PNG
    with pytest.raises(InvalidContentError, match="Not a valid WebP file"):
        WebPImage(b"RIFF1234WAVEdata", ImageMetadata())
    with pytest.raises(InvalidContentError, match="GIF"):
        GifImage(b"GIF", ImageMetadata())


def test_audio_verifiers():
    assert Mp3Audio.verify(b"ID3")
    assert Mp3Audio.verify(b"\xff\xfb")
    assert not Mp3Audio.verify(b"\xff\xf1")
    assert WavAudio.verify(b"RIFF\x00\x00\x00\x00WAVEfmt")
    assert not WavAudio.verify(b"RIFF\x00\x00\x00\x00AVI fmt")
    assert FlacAudio.verify(b"fLaC")
    assert AacAudio.verify(b"\xff\xf1")
    assert OggAudio.verify(b"OggS")
    assert not OggAudio.verify(b"Ogg")


def test_audio_construction():
    audio = Mp3Audio(b"ID3data", AudioMetadata(artist="Someone", year=1999))
    assert audio.metadata.artist == "Someone"
    assert audio.CODEC == Codec.MP3
    with pytest.raises(InvalidContentError, match="Not a valid WAV file"):
        WavAudio(b"RIFF", AudioMetadata())
    with pytest.raises(InvalidContentError, match="OGG"):
        OggAudio(b"fLaC", AudioMetadata())


def test_video_verifiers():
    assert Mp4Video.verify(b"\x00\x00\x00\x20ftyp")
    assert not Mp4Video.verify(b"\x00\x00\x00ftyp")
    assert MovVideo.verify(b"\x00\x00\x00\x14ftypqt  ")
    assert not MovVideo.verify(b"\x00\x00\x00\x14ftypisom")
    assert MkvVideo.verify(b"\x1a\x45\xdf\xa3")
    assert AviVideo.verify(b"RIFF\x00\x00\x00\x00AVI x")
    assert not AviVideo.verify(b"RIFF\x00\x00\x00\x00AVI ")


def test_video_construction():
    video = Mp4Video(b"\x00\x00\x00\x20ftypisom", VideoMetadata(frame_rate=24.0))
    assert video.metadata.frame_rate == 24.0
    assert video.CODEC == Codec.MP4
    with pytest.raises(InvalidContentError, match="Not a valid MKV file"):
        MkvVideo(b"\x00\x00", VideoMetadata())
    with pytest.raises(InvalidContentError, match="MOV"):
        MovVideo(b"\x00\x00\x00\x20ftypisom", VideoMetadata())


def test_default_metadata():
    img = JpegImage(b"\xff\xd8\xff")
    assert img.metadata == ImageMetadata()
    assert img.metadata.tags == []


def test_detection_agrees_with_verified_class():
    samples = {
        PdfDocument: b"%PDF-1.4 x",
        JpegImage: b"\xff\xd8\xff\xe0abc",
        FlacAudio: b"fLaC\x00",
        MkvVideo: b"\x1a\x45\xdf\xa3\x00",
    }
    for cls, data in samples.items():
        assert cls.verify(data)
        assert detect_content_type(data) == cls.CODEC