"""Contract constants for generated artifacts."""

ARTIFACT_VERSION = "0.1"

# Naming defaults (can be overridden per call through GenerationOptions).
DEFAULT_BUILDER_SUFFIX = "Builder"
DEFAULT_FACTORY_NAME = "builder"

# Targets understood by buildergen.api.render().
RENDER_TARGETS = ("rust", "python")
