"""Errors raised when a perturbation cannot be applied."""


class ScenarioError(ValueError):
    """Base class for scenario perturbation failures."""


class ConfigurationError(ScenarioError):
    """The target curve has no per-node metadata to match shifts against."""


class UnsupportedCurveError(ScenarioError):
    """The target curve cannot be rebuilt from adjusted node values."""
