"""Implementations of the domain interfaces."""

from .backtracking_isomorphism_mapper import BacktrackingIsomorphismMapper
from .networkx_isomorphism_mapper import NetworkXIsomorphismMapper
from .quaternion_superimposer import (
    RMSDMappingEvaluator,
    calc_rms,
    center,
    centroid,
    kabsch_fit,
    quaternion_fit,
    rotate_coords,
)

MAPPERS = {
    "backtracking": BacktrackingIsomorphismMapper,
    "networkx": NetworkXIsomorphismMapper,
}

__all__ = [
    "MAPPERS",
    "BacktrackingIsomorphismMapper",
    "NetworkXIsomorphismMapper",
    "RMSDMappingEvaluator",
    "calc_rms",
    "center",
    "centroid",
    "kabsch_fit",
    "quaternion_fit",
    "rotate_coords",
]
