"""Codec – streaming JSON record decoder and encoder."""
from logstream.codec.json_codec import RecordDecoder, RecordEncoder

__all__ = ["RecordDecoder", "RecordEncoder"]
