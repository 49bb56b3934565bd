"""Core logic for g2bi.

- instruction_builder: Pure step generation from group hierarchies
- lxfml: LXFML document loading, transformation and saving
"""

from .instruction_builder import build_instruction, build_steps, generate_steps, step_name
from .lxfml import (
    LxfmlDocument,
    apply_instruction,
    find_lxfml_root,
    instruction_to_element,
    load_document,
    preview,
    read_group_system,
    regenerate,
    remove_building_instructions,
    save_document,
    serialize_document,
    step_to_element,
)

__all__ = [
    "LxfmlDocument",
    "apply_instruction",
    "build_instruction",
    "build_steps",
    "find_lxfml_root",
    "generate_steps",
    "instruction_to_element",
    "load_document",
    "preview",
    "read_group_system",
    "regenerate",
    "remove_building_instructions",
    "save_document",
    "serialize_document",
    "step_name",
    "step_to_element",
]
