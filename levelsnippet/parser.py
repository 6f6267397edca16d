from dissect.cstruct import cstruct

# everything in a bedrock level.dat is little endian
definitions = """
struct LevelHeader {
    uint32  version;
    uint32  length;         // size of the tag data after this header
};

struct RootTag {
    uint8   tagType;
    uint16  nameLength;
    char    name[nameLength];
};
"""

parser = cstruct(endian="<").load(definitions)

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
