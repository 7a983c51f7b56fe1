"""Line prefixes of the LCOV tracefile grammar.

Each line of a record is ``<TOKEN>:<fields>``:

    BRDA  branch data      BRDA:<line>,<block>,<branch>,<taken|->
    BRF   branches found   BRF:<found>
    BRH   branches hit     BRH:<hit>
    FN    function name    FN:<line>,<name>
    FNDA  function data    FNDA:<count>,<name>
    FNF   functions found  FNF:<found>
    FNH   functions hit    FNH:<hit>
"""

BRANCH_DATA = "BRDA"
BRANCHES_FOUND = "BRF"
BRANCHES_HIT = "BRH"

FUNCTION_NAME = "FN"
FUNCTION_DATA = "FNDA"
FUNCTIONS_FOUND = "FNF"
FUNCTIONS_HIT = "FNH"
