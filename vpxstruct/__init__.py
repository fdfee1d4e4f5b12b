"""
# vpxstruct: the records of the pinball table files.

A table file is made of two kinds of records:

 1. fixed-size records (vpxstruct.core.Chunk): a flat sequence of fields with
    a declared total size, the cursor must land exactly at the end of it
    once all the fields are read (materials are saved this way).

 2. BIFF streams (vpxstruct.biff.BiffData): a sequence of tagged records,
    each one with its own length, closed by an end tag. The items of the
    table (rubbers, textures, ...) are saved this way.

Both define the same two operations

 1. unpack(): reading the binary data and build a high-level representation
    of that, starting from the actual offset of the stream.

 2. pack(): encode the high-level representation into binary data.

"""
