"""Constants for g2bi."""

# LXFML element tags
LXFML_TAG = "LXFML"
GROUP_SYSTEM_TAG = "GroupSystem"
GROUP_TAG = "Group"
BUILDING_INSTRUCTIONS_TAG = "BuildingInstructions"
BUILDING_INSTRUCTION_TAG = "BuildingInstruction"
STEP_TAG = "Step"
PART_REF_TAG = "PartRef"

# LXFML attribute names
PART_REFS_ATTR = "partRefs"
PART_REF_ATTR = "partRef"
NAME_ATTR = "name"

DEFAULT_GUIDE_NAME = "BuildingGuide1"
DEFAULT_MAX_SUBSTEP_DEPTH = 3
DEFAULT_CONFIG_FILENAME = "g2bi.toml"
