"""
Byte-level transforms composed by the encoder: run-length compression,
CRC-32 checksum and base-62 text encoding. Each is a stateless function pair.
"""
