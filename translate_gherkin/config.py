"""
Project-wide constants.

Module Contents:
    APP_NAME: Application name for display purposes
    FEATURE_SUFFIX: File suffix of Gherkin feature files
    DEFAULT_JOBS: Default number of files translated concurrently by the CLI
    DIALECT_ENV_VAR: Environment variable read for the default output dialect

Runtime options of a translation live in
:class:`translate_gherkin.translator.TranslatorConfig`.
"""

import os

# Application name for display and identification
APP_NAME = "translate-gherkin"

# Directories given on the command line are searched for these files
FEATURE_SUFFIX = ".feature"

# Worker threads used when translating many files
DEFAULT_JOBS = min(32, (os.cpu_count() or 1) + 4)

# Overrides the default of the CLI --dialect option
DIALECT_ENV_VAR = "GHERKIN_DIALECT"
