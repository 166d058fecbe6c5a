"""Tests for the default transcoding facility."""

import pytest

from viewlocale.transcoding import codec_transcode


class TestCodecTranscodeBytes:
    """Byte input is converted between encodings."""

    def test_latin1_to_utf8(self) -> None:
        assert codec_transcode("ISO-8859-1", "UTF-8", b"caf\xe9") == b"caf\xc3\xa9"

    def test_utf8_to_latin2(self) -> None:
        assert codec_transcode("UTF-8", "ISO-8859-2", "Dvořák".encode()) == "Dvořák".encode(
            "iso-8859-2"
        )

    def test_invalid_source_bytes_propagate(self) -> None:
        """Decode errors are not caught."""
        with pytest.raises(UnicodeDecodeError):
            codec_transcode("UTF-8", "ISO-8859-1", b"\xff\xfe\xfa")

    def test_unrepresentable_target_propagates(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            codec_transcode("UTF-8", "ISO-8859-1", "€".encode())


class TestCodecTranscodeText:
    """Text input is already decoded and only checked against the target."""

    def test_representable_text_unchanged(self) -> None:
        assert codec_transcode("ISO-8859-1", "UTF-8", "café") == "café"

    def test_unrepresentable_text_raises(self) -> None:
        with pytest.raises(UnicodeEncodeError):
            codec_transcode("UTF-8", "ISO-8859-1", "€ 5")

    def test_unknown_encoding_raises(self) -> None:
        with pytest.raises(LookupError):
            codec_transcode("NOT-A-CODEC", "UTF-8", "abc")


class TestCodecTranscodeAliases:
    """Names that differ only by alias select the same codec."""

    @pytest.mark.parametrize(
        ("from_encoding", "to_encoding", "value"),
        [
            ("UTF8", "UTF-8", b"caf\xc3\xa9"),
            ("LATIN1", "ISO-8859-1", b"caf\xe9"),
        ],
    )
    def test_bytes_returned_unchanged(
        self, from_encoding: str, to_encoding: str, value: bytes
    ) -> None:
        assert codec_transcode(from_encoding, to_encoding, value) == value

    def test_invalid_bytes_pass_through_between_aliases(self) -> None:
        """The same codec on both sides leaves bytes untouched."""
        assert codec_transcode("UTF8", "UTF-8", b"\xff") == b"\xff"
