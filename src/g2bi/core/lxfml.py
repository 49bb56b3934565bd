"""LXFML document loading, transformation and saving.

Reads the group hierarchy out of an LXFML document and writes generated
building instructions back into it. Previous ``BuildingInstructions``
elements are removed first, so regenerating is idempotent. Comments and
processing instructions survive a load/save cycle, including those
outside the root element.
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from ..constants import (
    BUILDING_INSTRUCTION_TAG,
    BUILDING_INSTRUCTIONS_TAG,
    DEFAULT_GUIDE_NAME,
    DEFAULT_MAX_SUBSTEP_DEPTH,
    GROUP_SYSTEM_TAG,
    GROUP_TAG,
    LXFML_TAG,
    NAME_ATTR,
    PART_REF_ATTR,
    PART_REF_TAG,
    PART_REFS_ATTR,
    STEP_TAG,
)
from ..errors import (
    DocumentReadError,
    DocumentWriteError,
    GroupNestingError,
    InputNotFoundError,
    MissingGroupsError,
    NotLxfmlError,
)
from ..models import BuildingInstruction, Group, Step
from .instruction_builder import build_instruction

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


@dataclass
class LxfmlDocument:
    """A parsed document.

    Attributes:
        root: Root element.
        prolog: Comments and processing instructions before the root.
        epilog: Comments and processing instructions after the root.
    """

    root: ET.Element
    prolog: list[ET.Element] = field(default_factory=list)
    epilog: list[ET.Element] = field(default_factory=list)


class _DocumentBuilder:
    """Parser target that keeps comments and processing instructions.

    Nodes inside the root element go into the tree. Nodes outside it are
    collected separately, since an element tree has a single root.
    """

    def __init__(self) -> None:
        self._builder = ET.TreeBuilder(insert_comments=True, insert_pis=True)
        self._depth = 0
        self._root_closed = False
        self.prolog: list[ET.Element] = []
        self.epilog: list[ET.Element] = []

    def start(self, tag: str, attrs: dict[str, str]) -> ET.Element:
        self._depth += 1
        return self._builder.start(tag, attrs)

    def end(self, tag: str) -> ET.Element:
        self._depth -= 1
        if self._depth == 0:
            self._root_closed = True
        return self._builder.end(tag)

    def data(self, data: str) -> None:
        if self._depth:
            self._builder.data(data)

    def comment(self, text: str) -> None:
        if self._depth:
            self._builder.comment(text)
        else:
            self._outside_root(ET.Comment(text))

    def pi(self, target: str, text: str | None = None) -> None:
        if self._depth:
            self._builder.pi(target, text)
        else:
            self._outside_root(ET.ProcessingInstruction(target, text))

    def _outside_root(self, node: ET.Element) -> None:
        (self.epilog if self._root_closed else self.prolog).append(node)

    def close(self) -> ET.Element:
        return self._builder.close()


def load_document(path: Path) -> LxfmlDocument:
    """Parse an XML document from disk.

    Args:
        path: Path to the input document

    Returns:
        Parsed document

    Raises:
        InputNotFoundError: If the file does not exist
        DocumentReadError: If the file cannot be read
        NotLxfmlError: If the file is not well-formed XML
    """
    if not path.is_file():
        raise InputNotFoundError(f"File not found: {path}")

    builder = _DocumentBuilder()
    try:
        root = ET.parse(path, parser=ET.XMLParser(target=builder)).getroot()
    except ET.ParseError as e:
        raise NotLxfmlError(f"Input file is not an LXFML document: {e}") from e
    except OSError as e:
        raise DocumentReadError(f"Unable to read the input file: {e}") from e

    logger.debug("Loaded %s", path)
    return LxfmlDocument(root=root, prolog=builder.prolog, epilog=builder.epilog)


def find_lxfml_root(document: LxfmlDocument) -> ET.Element:
    """Return the first ``LXFML`` element, the document root included."""
    lxfml = next(document.root.iter(LXFML_TAG), None)
    if lxfml is None:
        raise NotLxfmlError("Input file is not an LXFML document.")
    return lxfml


def _read_group(element: ET.Element) -> Group:
    children = [_read_group(child) for child in element.findall(GROUP_TAG)]
    return Group.from_part_refs(element.get(PART_REFS_ATTR), children)


def read_group_system(lxfml: ET.Element) -> list[Group]:
    """Read the top-level groups of the first ``GroupSystem``.

    Raises:
        MissingGroupsError: If the document has no ``GroupSystem``
    """
    group_system = next(lxfml.iter(GROUP_SYSTEM_TAG), None)
    if group_system is None:
        raise MissingGroupsError(
            "LXFML file does not contain any groups. Unable to generate building instructions."
        )

    groups = [_read_group(element) for element in group_system.findall(GROUP_TAG)]
    logger.debug("Read %d top-level group(s)", len(groups))
    return groups


def remove_building_instructions(lxfml: ET.Element) -> int:
    """Remove every ``BuildingInstructions`` element below ``lxfml``.

    Returns:
        Number of elements removed
    """
    # ElementTree has no parent pointers; collect (parent, child) pairs first
    pairs = [
        (parent, child)
        for parent in lxfml.iter()
        for child in parent
        if child.tag == BUILDING_INSTRUCTIONS_TAG
    ]
    for parent, child in pairs:
        parent.remove(child)

    removed = len(pairs)
    if removed:
        logger.info("Removed %d existing building instruction element(s)", removed)
    return removed


def step_to_element(step: Step) -> ET.Element:
    """Serialize a step and its sub-steps to a ``Step`` element."""
    element = ET.Element(STEP_TAG, {NAME_ATTR: step.name})
    for part_ref in step.part_refs:
        ET.SubElement(element, PART_REF_TAG, {PART_REF_ATTR: part_ref})
    for substep in step.substeps:
        element.append(step_to_element(substep))
    return element


def instruction_to_element(instruction: BuildingInstruction) -> ET.Element:
    """Serialize an instruction to a ``BuildingInstructions`` container element."""
    container = ET.Element(BUILDING_INSTRUCTIONS_TAG)
    guide = ET.SubElement(container, BUILDING_INSTRUCTION_TAG, {NAME_ATTR: instruction.name})
    for step in instruction.steps:
        guide.append(step_to_element(step))
    return container


def apply_instruction(lxfml: ET.Element, instruction: BuildingInstruction) -> None:
    """Replace any existing building instructions with ``instruction``."""
    remove_building_instructions(lxfml)
    lxfml.append(instruction_to_element(instruction))


def serialize_document(document: LxfmlDocument, *, indent: bool = True) -> str:
    """Serialize a document, prolog and epilog included."""
    if indent:
        ET.indent(document.root)
    parts = [XML_DECLARATION]
    parts.extend(ET.tostring(node, encoding="unicode") for node in document.prolog)
    parts.append(ET.tostring(document.root, encoding="unicode"))
    parts.extend(ET.tostring(node, encoding="unicode") for node in document.epilog)
    return "\n".join(parts) + "\n"


def save_document(document: LxfmlDocument, path: Path, *, indent: bool = True) -> None:
    """Write the document as UTF-8 with an XML declaration."""
    text = serialize_document(document, indent=indent)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise DocumentWriteError(f"Unable to write the output file: {e}") from e
    logger.info("Wrote %s", path)


def _nesting_error(e: RecursionError) -> GroupNestingError:
    return GroupNestingError(f"Group hierarchy is nested too deeply to process: {e}")


def preview(
    input_path: Path,
    max_substep_depth: int = DEFAULT_MAX_SUBSTEP_DEPTH,
    guide_name: str = DEFAULT_GUIDE_NAME,
) -> BuildingInstruction:
    """Build the instruction for a document without modifying it."""
    lxfml = find_lxfml_root(load_document(input_path))
    try:
        return build_instruction(read_group_system(lxfml), max_substep_depth, guide_name)
    except RecursionError as e:
        raise _nesting_error(e) from e


def regenerate(
    input_path: Path,
    output_path: Path | None = None,
    max_substep_depth: int = DEFAULT_MAX_SUBSTEP_DEPTH,
    guide_name: str = DEFAULT_GUIDE_NAME,
    *,
    indent: bool = True,
) -> BuildingInstruction:
    """Regenerate the building instructions of an LXFML document.

    Args:
        input_path: Document to read
        output_path: Where to write the result (defaults to ``input_path``)
        max_substep_depth: Maximum sub-step nesting depth
        guide_name: Name of the generated ``BuildingInstruction``
        indent: Pretty-print the written document

    Returns:
        The generated instruction

    Raises:
        GroupNestingError: If the hierarchy is too deep to walk; nothing is written
    """
    document = load_document(input_path)
    lxfml = find_lxfml_root(document)
    try:
        instruction = build_instruction(read_group_system(lxfml), max_substep_depth, guide_name)
        apply_instruction(lxfml, instruction)
        save_document(document, output_path or input_path, indent=indent)
    except RecursionError as e:
        raise _nesting_error(e) from e
    return instruction
