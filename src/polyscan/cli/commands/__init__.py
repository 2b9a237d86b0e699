"""polyscan subcommands."""
