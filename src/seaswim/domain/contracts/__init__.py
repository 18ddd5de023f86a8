"""Contracts (protocols and shared shapes) used across layers."""

from seaswim.domain.contracts.candidate_predicate import CandidatePredicate
from seaswim.domain.contracts.locatable import Locatable
from seaswim.domain.contracts.raw_tide_sample import RawTideSample

__all__ = ["CandidatePredicate", "Locatable", "RawTideSample"]
