"""Runtime plumbing shared by the roster checks and the command line."""
