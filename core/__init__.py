# Core package - foundational components
#
# Modules:
# - config: Application settings
# - errors: Store exceptions and their HTTP status codes
# - logging: Structured logging
# - storage: Article/user stores and product backends (PostgreSQL, memory)
