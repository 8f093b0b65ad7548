"""Entry point for term_menu: prints usage and exits."""

import sys

DESCRIPTION = """\
####################### DESCRIPTION: #######################
#
# term_menu provides single- and multi-selection menus in
# the terminal. It is meant to be imported, not executed.
#
# It offers two functions, 'singleselect' and 'multiselect':
#
# options (sequence of str):
#       The menu options, at least one, none empty.
# defaults:
#       - For multiselect:
#         A sequence of "true"/"false" (or bools) marking
#         preselected ([✔]) options. Missing entries are
#         unselected.
#       - For singleselect:
#         The index of the default selected option (0).
# legend (keyword):
#       "true" (or True) to display navigation instructions.
#
# multiselect returns one bool per option, in option order.
# singleselect returns the chosen label, or "" if the user
# deselected everything.
#
########################## USAGE: ##########################
#
# Navigation Controls:
#   ↓ (Down Arrow) => Move cursor down
#   ↑ (Up Arrow)   => Move cursor up
#   ⎵ (Space)      => Toggle selection (for multiselect)
#                     Make selection (for singleselect)
#   ⏎ (Enter)      => Confirm selection
#
######################### EXAMPLE: #########################
#
# from term_menu import multiselect, singleselect
#
# my_options = ["Option 1", "Option 2", "Option 3"]
#
# For multiselect:
# result = multiselect(my_options, ["true", "false", "false"],
#                      legend="true")
#
# For singleselect:
# result = singleselect(my_options, 0, legend="true")
#
############################################################"""


def main() -> int:
    """Main entry point."""
    print(DESCRIPTION)
    return 1


if __name__ == "__main__":
    sys.exit(main())
