"""Constants for diffgate."""

# Lock files are noise for commit-message generation; always excluded first.
# *.lock covers yarn.lock, Cargo.lock, Gemfile.lock, Pipfile.lock, etc.
BUILTIN_EXCLUDES: tuple[str, ...] = (
    "package-lock.json",
    "pnpm-lock.yaml",
    "*.lock",
)

DIFF_ALGORITHM = "minimal"

NOT_A_REPOSITORY_MESSAGE = "The current directory must be a Git repository!"

CONFIG_DIR_NAME = ".diffgate"

# Subprocess timeouts (seconds); diff commands themselves run without one
INIT_TOOL_CHECK_TIMEOUT = 10

# CLI exit codes
EXIT_GIT_FAILURE = 1
EXIT_TOOL_MISSING = 2
EXIT_NOT_A_REPOSITORY = 3
EXIT_NO_CHANGES = 20
