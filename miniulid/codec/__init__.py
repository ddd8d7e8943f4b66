from miniulid.codec.bits import Components, pack, unpack
from miniulid.codec.crockford import ALPHABET, decode, encode
from miniulid.codec.timesplit import EPOCH, compose, split

__all__ = [
    "ALPHABET",
    "Components",
    "EPOCH",
    "compose",
    "decode",
    "encode",
    "pack",
    "split",
    "unpack",
]
