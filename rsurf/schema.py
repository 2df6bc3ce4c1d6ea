"""Define standardized column names for observation DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObservationColumns:
    """Container for standardized column labels.

    These column names are used in the observation table throughout the
    analysis pipeline, so generation, feature building, regression and
    plotting all agree on one vocabulary.

    Attributes:
        extro_o: Extroversion of the older partner, 1-7 rating scale.
        extro_y: Extroversion of the younger partner, 1-7 rating scale.
        happy: Relationship happiness, 1-5 rating scale.
        ce_old: ``extro_o`` centered at the scale midpoint.
        ce_young: ``extro_y`` centered at the scale midpoint.
        xsquared: ``ce_old**2``.
        xy: ``ce_old * ce_young``.
        ysquared: ``ce_young**2``.
    """

    extro_o: str = "extro_o"
    extro_y: str = "extro_y"
    happy: str = "happy"
    ce_old: str = "ce_old"
    ce_young: str = "ce_young"
    xsquared: str = "xsquared"
    xy: str = "xy"
    ysquared: str = "ysquared"

    @property
    def raw(self) -> tuple[str, str, str]:
        return (self.extro_o, self.extro_y, self.happy)

    @property
    def features(self) -> tuple[str, str, str, str, str]:
        return (self.ce_old, self.ce_young, self.xsquared, self.xy, self.ysquared)


COLUMNS = ObservationColumns()

# Coefficient order of the fitted surface (after the intercept).
SURFACE_TERMS: tuple[str, ...] = (
    COLUMNS.ce_old,
    COLUMNS.ce_young,
    COLUMNS.xy,
    COLUMNS.ysquared,
    COLUMNS.xsquared,
)
INTERCEPT = "intercept"
