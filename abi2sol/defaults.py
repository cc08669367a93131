"""Default generation options."""

# Interface identifier when none is given
NAME = 'MyInterface'

# SPDX license identifier for the header
LICENSE = 'UNLICENSED'

# Version constraint for `pragma solidity`
SOLIDITY_VERSION = '>=0.7.0 <0.9.0'

# Formatter invocation; overridable with the ABI2SOL_PRETTIER environment variable
PRETTIER_COMMAND = (
    'npx', '--no-install', 'prettier',
    '--plugin=prettier-plugin-solidity',
    '--parser', 'solidity-parse',
)
PRETTIER_ENV_VAR = 'ABI2SOL_PRETTIER'
PRETTIER_TIMEOUT = 30
