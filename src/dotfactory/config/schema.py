"""
Output Configuration Schema

Pydantic model describing how a font or bitmap is rendered into generated
source text. One OutputConfiguration is one preset; the code generator reads
nothing else.
"""

import re
from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..text_utils import repeat


def _symbol_key(value: str) -> str:
    return re.sub(r'[^a-z0-9]', '', value.lower())


class _SymbolicEnum(str, Enum):
    """Enum persisted by symbolic name.

    Lookup is case and separator insensitive and also understands the names
    used by preset files from the original desktop application.
    """

    @classmethod
    def _legacy_names(cls) -> Dict[str, str]:
        return {}

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = _symbol_key(value)
        legacy = {_symbol_key(k): v for k, v in cls._legacy_names().items()}
        key = legacy.get(key, key)
        for member in cls:
            if key in (_symbol_key(member.value), _symbol_key(member.name)):
                return member
        return None

    def __str__(self) -> str:
        return self.value


class PaddingRemoval(_SymbolicEnum):
    """Padding removal policy for one axis."""
    NONE = "none"            # keep all padding
    TIGHTEST = "tightest"    # trim each bitmap as much as possible
    FIXED = "fixed"          # trim all bitmaps by the least padding in the set

    @classmethod
    def _legacy_names(cls) -> Dict[str, str]:
        return {"Tighest": "tightest"}


class LineWrap(_SymbolicEnum):
    AT_COLUMN = "at_column"
    AT_BITMAP = "at_bitmap"


class CommentStyle(_SymbolicEnum):
    C = "c"        # /* */
    CPP = "cpp"    # //


class IndentStyle(_SymbolicEnum):
    TABS = "tabs"
    SPACES = "spaces"


class BitLayout(_SymbolicEnum):
    """Order in which pixels are packed into bytes."""
    ROW_MAJOR = "row_major"        # '|' = 0x80,0x80,0x80  '_' = 0x00,0x00,0xFF
    COLUMN_MAJOR = "column_major"  # '|' = 0xFF,0x00,0x00  '_' = 0x80,0x80,0x80


class ByteOrder(_SymbolicEnum):
    LSB_FIRST = "lsb_first"
    MSB_FIRST = "msb_first"


class ByteFormat(_SymbolicEnum):
    BINARY = "binary"
    HEX = "hex"


class Rotation(_SymbolicEnum):
    """Clockwise rotation applied to every bitmap."""
    ROTATE_ZERO = "rotate_zero"
    ROTATE_NINETY = "rotate_ninety"
    ROTATE_ONE_EIGHTY = "rotate_one_eighty"
    ROTATE_TWO_SEVENTY = "rotate_two_seventy"

    @property
    def degrees(self) -> int:
        return _ROTATION_DEGREES[self]

    @property
    def display(self) -> str:
        return f"{self.degrees}°"


class DescriptorFormat(_SymbolicEnum):
    """How a descriptor value is emitted, if at all."""
    DONT_DISPLAY = "dont_display"
    DISPLAY_IN_BITS = "display_in_bits"
    DISPLAY_IN_BYTES = "display_in_bytes"

    @property
    def display(self) -> str:
        return _DESCRIPTOR_DISPLAY[self]


_ROTATION_DEGREES = {
    Rotation.ROTATE_ZERO: 0,
    Rotation.ROTATE_NINETY: 90,
    Rotation.ROTATE_ONE_EIGHTY: 180,
    Rotation.ROTATE_TWO_SEVENTY: 270,
}

_DESCRIPTOR_DISPLAY = {
    DescriptorFormat.DONT_DISPLAY: "Don't display",
    DescriptorFormat.DISPLAY_IN_BITS: "In bits",
    DescriptorFormat.DISPLAY_IN_BYTES: "In bytes",
}

# Conventional literal prefixes. Reference only: byte_leading_string is never
# updated from byte_format.
BYTE_LEADING_STRING_BINARY = "0b"
BYTE_LEADING_STRING_HEX = "0x"

BYTE_LEADING_STRINGS = {
    ByteFormat.BINARY: BYTE_LEADING_STRING_BINARY,
    ByteFormat.HEX: BYTE_LEADING_STRING_HEX,
}


class OutputConfiguration(BaseModel):
    """A complete output configuration preset.

    Attribute names are snake case. Each field also carries the camelCase
    alias used in preset files, and either name is accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    display_name: str = Field("", description="Name shown in preset selection lists")

    # Comments
    comment_variable_name: bool = Field(True, description="Emit a comment above each variable")
    comment_char_visualizer: bool = Field(True, description="Emit a text rendering of each character")
    comment_char_descriptor: bool = Field(True, description="Emit a comment with each descriptor")
    comment_style: CommentStyle = Field(CommentStyle.CPP, description="Comment syntax")
    bmp_visualizer_char: str = Field("#", description="Character drawn for set pixels in visualizer comments")

    # Whitespace
    indent_style: IndentStyle = Field(IndentStyle.TABS, description="Indent with tabs or spaces")
    num_indent_spaces: int = Field(2, description="Spaces per indent level when indenting with spaces")

    # Transforms
    rotation: Rotation = Field(Rotation.ROTATE_ZERO, description="Rotation applied to bitmaps")
    flip_horizontal: bool = Field(False, description="Mirror bitmaps horizontally")
    flip_vertical: bool = Field(False, description="Mirror bitmaps vertically")

    # Padding
    padding_removal_horizontal: PaddingRemoval = Field(PaddingRemoval.FIXED)
    padding_removal_vertical: PaddingRemoval = Field(PaddingRemoval.TIGHTEST)

    line_wrap: LineWrap = Field(LineWrap.AT_COLUMN, description="Break lines after each column or each bitmap")

    # Byte packing
    bit_layout: BitLayout = Field(BitLayout.ROW_MAJOR)
    byte_order: ByteOrder = Field(ByteOrder.MSB_FIRST)
    byte_format: ByteFormat = Field(ByteFormat.HEX)
    byte_leading_string: str = Field(BYTE_LEADING_STRING_HEX, description="Literal prefix for each byte")

    # Descriptors and lookup tables
    generate_lookup_array: bool = Field(True)
    desc_char_width: DescriptorFormat = Field(DescriptorFormat.DISPLAY_IN_BITS)
    desc_char_height: DescriptorFormat = Field(DescriptorFormat.DONT_DISPLAY)
    desc_font_height: DescriptorFormat = Field(DescriptorFormat.DISPLAY_IN_BYTES)
    generate_lookup_blocks: bool = Field(False)
    lookup_blocks_new_after_char_count: int = Field(
        80, description="Start a new lookup block after this many characters"
    )
    desc_img_width: DescriptorFormat = Field(DescriptorFormat.DISPLAY_IN_BYTES)
    desc_img_height: DescriptorFormat = Field(DescriptorFormat.DISPLAY_IN_BITS)

    # Space character
    generate_space_character_bitmap: bool = Field(False, description="Synthesize a bitmap for ' '")
    space_generation_pixels: int = Field(2, description="Width of the synthesized space in pixels")

    # Variable name templates; {0} is replaced with the font name
    var_nf_bitmaps: str = Field("const uint_8 {0}Bitmaps")
    var_nf_char_info: str = Field("const FONT_CHAR_INFO {0}Descriptors")
    var_nf_font_info: str = Field("const FONT_INFO {0}FontInfo")
    var_nf_width: str = Field("const uint_8 {0}Width")
    var_nf_height: str = Field("const uint_8 {0}Height")

    def clone(self) -> "OutputConfiguration":
        """Return an independent copy equal in every field."""
        return self.model_copy()

    def indent_string(self) -> str:
        """Get the string for one level of indentation."""
        if self.indent_style == IndentStyle.TABS:
            return "\t"
        return repeat(" ", self.num_indent_spaces)

    def variable_names(self, font_name: str) -> Dict[str, str]:
        """Resolve the variable name templates for a font.

        Args:
            font_name: Name substituted into each template's {0} slot

        Returns:
            Dict with keys bitmaps, char_info, font_info, width, height
        """
        return {
            'bitmaps': self.var_nf_bitmaps.format(font_name),
            'char_info': self.var_nf_char_info.format(font_name),
            'font_info': self.var_nf_font_info.format(font_name),
            'width': self.var_nf_width.format(font_name),
            'height': self.var_nf_height.format(font_name),
        }
