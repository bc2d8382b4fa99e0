"""Click subcommands for release-candidate."""
