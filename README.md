# cim-ipld

Typed wrappers for common file formats. Each wrapper checks its data against
the format's magic bytes when it is built. The package can also detect a
format from raw data.

Everything lives in the `cim_ipld.content_types` module.

## Formats

| Kind      | Classes                                                        |
|-----------|----------------------------------------------------------------|
| Documents | `PdfDocument`, `DocxDocument`, `MarkdownDocument`, `TextDocument` |
| Images    | `JpegImage`, `PngImage`, `GifImage`, `WebPImage`               |
| Audio     | `Mp3Audio`, `WavAudio`, `FlacAudio`, `AacAudio`, `OggAudio`    |
| Video     | `Mp4Video`, `MovVideo`, `MkvVideo`, `AviVideo`                 |

Each class has a `CODEC` class attribute holding its member of the `Codec`
integer enum. Documents use the `0x600000` range, images `0x610000`, audio
`0x620000` and video `0x630000`. For example, `Codec.PDF` is `0x600001`.

Metadata is held in the dataclasses `DocumentMetadata`, `ImageMetadata`,
`AudioMetadata` and `VideoMetadata`. Every field is optional, and `tags`
defaults to an empty list. If you build a wrapper without metadata, it gets
an empty metadata object.

## Installation

```
pip install .
```

## Usage

### Building a wrapper

The binary wrappers take `data` (stored as `bytes`) and an optional
`metadata`. If the data does not match the format, building the wrapper
raises `InvalidContentError`, which is a subclass of `ValueError`:

```python
from cim_ipld.content_types import (
    DocumentMetadata,
    ImageMetadata,
    InvalidContentError,
    PdfDocument,
    PngImage,
)

pdf = PdfDocument(b"%PDF-1.4\n...", DocumentMetadata(title="Report"))

try:
    PngImage(b"not a png", ImageMetadata())
except InvalidContentError as exc:
    print(exc)  # Not a valid PNG file
```

### Checking data without building a wrapper

Each binary class has a static `verify` method:

```python
PdfDocument.verify(b"%PDF-1.7")   # True
PdfDocument.verify(b"Not a PDF")  # False
```

The checks are:

- PDF: `%PDF-`
- DOCX: a ZIP header, `PK\x03\x04`
- JPEG: `\xff\xd8\xff`
- PNG: the 8-byte PNG signature
- GIF: `GIF8`
- MP3: `ID3` or `\xff\xfb`
- FLAC: `fLaC`
- AAC: `\xff\xf1`
- OGG: `OggS`
- MKV: `\x1a\x45\xdf\xa3`
- WebP, WAV and AVI: `RIFF`, followed at offset 8 by `WEBP`, `WAVE` or
  `AVI ` respectively. The data must be longer than 12 bytes.
- MP4: `ftyp` at offset 4. The data must be at least 8 bytes.
- MOV: `ftyp` at offset 4 and `qt  ` at offset 8. The data must be at
  least 12 bytes.

### Text documents

`MarkdownDocument` and `TextDocument` hold a `content` string. They do no
format check. You can also build them from UTF-8 bytes with `from_bytes`.
It raises `InvalidContentError` if the bytes are not valid UTF-8:

```python
from cim_ipld.content_types import DocumentMetadata, MarkdownDocument

doc = MarkdownDocument.from_bytes(b"# Title\n", DocumentMetadata())
print(doc.content)
```

### Detecting a format

```python
from cim_ipld.content_types import Codec, content_type_name, detect_content_type

kind = detect_content_type(b"\x89PNG\r\n\x1a\n...")
assert kind == Codec.PNG
print(content_type_name(kind))  # PNG Image
```

`detect_content_type` tries documents first, then images, then audio, then
video, and returns the first match. If nothing matches, it returns `None`.
A few behaviours to note:

- Any ZIP data is reported as `Codec.DOCX`.
- Markdown and plain text are never detected.
- The `ftyp` video check needs more than 12 bytes. With `qt  ` at offset 8
  the result is `Codec.MOV`; otherwise it is `Codec.MP4`.

`content_type_name` accepts a `Codec` member or a plain integer. It returns
a readable name such as `"MP3 Audio"`, or `"Unknown"` for any other value.

## What this package does not do

The package does not:

- compute content identifiers or hashes
- encode or decode content as CBOR or JSON
- chain content together
- store or fetch content anywhere
- parse or transform the files themselves: it does not read image sizes,
  audio durations or other metadata out of the data

It also has no command-line interface.

## Tests

```
pip install ".[test]"
pytest
```