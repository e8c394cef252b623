"""Process exit codes shared by all subcommands."""

OK = 0
# Invalid configuration, or warnings under --strict
INVALID = 1
# Bad usage, missing or unparsable config file
USER_ERR = 2
