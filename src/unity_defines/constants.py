"""Application-wide constants."""

HEADER = "scriptingDefineSymbols:"

PATH_ARG = "path="
SETS_ARG = "sets="
UNSETS_ARG = "unsets="

SYMBOL_SEPARATOR = ";"
CSV_SEPARATOR = ","

# Process exit codes.
EXIT_FAILURE = 1
EXIT_USAGE = 2

USAGE_TEXT = """\
Usage: unity-defines path=[projectSettingsPath] sets=[defineSets] unsets=[defineUnSets]

Where:
  projectSettingsPath is the path to the ProjectSettings.asset file (in the ProjectSettings folder of your Unity project)
  defineSets is a CSV string of scripting define symbols to add to each platform
  defineUnSets is a CSV string of scripting define symbols to remove from each platform

Note: Only one of sets or unsets is required\
"""

SECTION_NOT_FOUND_MESSAGE = (
    "Can't find scripting defines section of project settings. "
    "Is this a valid project settings asset?"
)
MULTIPLE_SECTIONS_MESSAGE = (
    "Found multiple scripting define sections. Is this a valid project settings asset?"
)
