"""Open-addressing hash tables, a radix-36 string hash, a Mersenne Twister and a Boggle solver."""

__version__ = "0.1.0"
__all__ = ["boggle", "hashtable", "htdemo", "mersenne", "strhash"]