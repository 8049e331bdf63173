# services/errors.py


class PlanGenerationError(Exception):
    """The remote model could not produce a usable plan (network, empty reply, bad JSON or schema)."""
