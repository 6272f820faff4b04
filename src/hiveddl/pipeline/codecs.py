from typing import Optional

from hiveddl.utils.exceptions import ConfigurationError

LZOP = "lzop"

LZO_INPUT_FORMAT = "com.hadoop.mapred.DeprecatedLzoTextInputFormat"
HIVE_IGNORE_KEY_OUTPUT_FORMAT = "org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat"


class CodecMap:
    """
    Maps short compression codec names to Hadoop codec class names.
    """

    _REGISTRY = {
        "none": None,
        "deflate": "org.apache.hadoop.io.compress.DefaultCodec",
        "gzip": "org.apache.hadoop.io.compress.GzipCodec",
        "bzip2": "org.apache.hadoop.io.compress.BZip2Codec",
        "lzo": "com.hadoop.compression.lzo.LzoCodec",
        "lzop": "com.hadoop.compression.lzo.LzopCodec",
        "lz4": "org.apache.hadoop.io.compress.Lz4Codec",
        "snappy": "org.apache.hadoop.io.compress.SnappyCodec",
    }

    @classmethod
    def get_codec_class_name(cls, codec: str) -> Optional[str]:
        if not codec:
            raise ConfigurationError("Codec name must not be empty")

        key = codec.strip().lower()
        if key in cls._REGISTRY:
            return cls._REGISTRY[key]

        # Already a class name
        if codec in cls._REGISTRY.values():
            return codec

        raise ConfigurationError(f"Unknown compression codec: {codec}")

    @classmethod
    def is_lzop(cls, codec: Optional[str]) -> bool:
        """
        True for the indexable LZOP codec, by alias or class name.

        Plain TEXTFILE storage cannot split indexed .lzo files, so these
        tables need the LZO-aware input format.
        """
        if not codec:
            return False
        return codec.strip().lower() == LZOP or codec.strip() == cls._REGISTRY[LZOP]
