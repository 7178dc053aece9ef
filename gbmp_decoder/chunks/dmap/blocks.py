from typing import List

from construct import Struct, Int8ul, Int16ul, Array

from ...world.blocks import BlockPrototype

BlockStructure = Struct(
    "left" / Int16ul,
    "right" / Int16ul,
    "top" / Int16ul,
    "bottom" / Int16ul,
    "lid" / Int16ul,
    "arrows" / Int8ul,
    "slope_type" / Int8ul,
)

BLOCK_STRUCTURE_SIZE = BlockStructure.sizeof()  # 12


def read_block_prototypes(data: bytes, count: int) -> List[BlockPrototype]:
    """
    Parse the DMAP block table.

    Args:
        data: Exactly count * 12 bytes of block records
        count: Number of records

    Returns:
        Prototypes in file order; a prototype's list index is what the
        column table refers to.
    """
    entries = Array(count, BlockStructure).parse(data)
    return [
        BlockPrototype(
            left=entry.left,
            right=entry.right,
            top=entry.top,
            bottom=entry.bottom,
            lid=entry.lid,
            arrows=entry.arrows,
            slope_type=entry.slope_type
        )
        for entry in entries
    ]
