"""Numerical inverse Laplace transform with concentrated matrix-exponentials."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from itertools import chain

from .coefficients import (
    DEFAULT_MAX_EVALUATIONS,
    CmeParam,
    Coefficients,
    precompute,
)

LaplaceFunc = Callable[[complex], complex]


class LaplaceInverter:
    """Approximates ``f(t)`` from its Laplace transform using a coefficient table."""

    def __init__(self, table: Sequence[Coefficients]) -> None:
        self._table = tuple(table)

    @property
    def max_evaluations(self) -> int:
        """Number of entries in the coefficient table."""
        return len(self._table)

    @classmethod
    def from_params(
        cls,
        params: Sequence[CmeParam],
        max_evaluations: int = DEFAULT_MAX_EVALUATIONS,
    ) -> "LaplaceInverter":
        """Build an inverter directly from CME parameter sets."""
        return cls(precompute(params, max_evaluations))

    def invert(self, func: LaplaceFunc, t: float, max_function_evals: int) -> float:
        """Evaluate the inverse transform of ``func`` at ``t``.

        ``func`` is called once for the real node and once for every
        complex node of the selected table entry.
        """
        if not 0 <= max_function_evals < len(self._table):
            raise ValueError(
                "Laplace maximum function evaluations must be less or equal to "
                f"{len(self._table) - 1}"
            )
        entry = self._table[max_function_evals]
        nodes = chain(
            [(complex(entry.first_eta), complex(entry.mu1))],
            (
                (complex(eta_re, eta_im), complex(entry.mu1, beta))
                for eta_re, eta_im, beta in entry.eta_betas
            ),
        )
        return sum((eta * func(beta / t)).real for eta, beta in nodes) / t


def laplace_inversion(
    func: LaplaceFunc,
    t: float,
    max_function_evals: int,
    table: Sequence[Coefficients],
) -> float:
    """Evaluate the inverse Laplace transform of ``func`` at ``t`` with ``table``."""
    return LaplaceInverter(table).invert(func, t, max_function_evals)