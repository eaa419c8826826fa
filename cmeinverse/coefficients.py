"""CME parameter sets and the per-evaluation-count coefficient table."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

DEFAULT_MAX_EVALUATIONS = 500


@dataclass(frozen=True)
class CmeParam:
    """One concentrated matrix-exponential distribution."""

    n: int
    a: tuple[float, ...]
    b: tuple[float, ...]
    c: float
    omega: float
    mu1: float
    cv2: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CmeParam":
        """Build a parameter set from a decoded JSON object."""
        try:
            return cls(
                n=int(data["n"]),
                a=tuple(float(x) for x in data["a"]),
                b=tuple(float(x) for x in data["b"]),
                c=float(data["c"]),
                omega=float(data["omega"]),
                mu1=float(data["mu1"]),
                cv2=float(data["cv2"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid CME parameter set: {exc!r}") from exc

    def to_mapping(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "n": self.n,
            "a": list(self.a),
            "b": list(self.b),
            "c": self.c,
            "omega": self.omega,
            "mu1": self.mu1,
            "cv2": self.cv2,
        }


@dataclass(frozen=True)
class Coefficients:
    """Precomputed eta/beta pairs for one maximum number of evaluations.

    ``eta_betas`` holds ``(eta_real, eta_imag, beta)`` triples; each node is
    evaluated at ``complex(mu1, beta)``. The leading node is the real pair
    ``(first_eta, mu1)``.
    """

    mu1: float
    eta_betas: tuple[tuple[float, float, float], ...]
    first_eta: float

    def to_mapping(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation."""
        return {
            "mu1": self.mu1,
            "eta_betas": [list(triple) for triple in self.eta_betas],
            "first_eta": self.first_eta,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Coefficients":
        """Build coefficients from a decoded JSON object."""
        try:
            triples = []
            for triple in data["eta_betas"]:
                eta_re, eta_im, beta = triple
                triples.append((float(eta_re), float(eta_im), float(beta)))
            return cls(
                mu1=float(data["mu1"]),
                eta_betas=tuple(triples),
                first_eta=float(data["first_eta"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid coefficient entry: {exc!r}") from exc


def parse_params(text: str) -> list[CmeParam]:
    """Parse a JSON array of CME parameter sets."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("CME parameters must be a JSON array")
    return [CmeParam.from_mapping(item) for item in data]


def steepest(params: Sequence[CmeParam], index: int) -> CmeParam:
    """Pick the steepest CME (lowest cv2) whose order is below ``index``.

    The first parameter set is the fallback and is always a candidate.
    """
    if not params:
        raise ValueError("no CME parameter sets given")
    best = params[0]
    for param in params[1:]:
        if param.n < index and param.cv2 < best.cv2:
            best = param
    return best


def _coefficients_for(param: CmeParam) -> Coefficients:
    betas = ((i + 1) * param.omega * param.mu1 for i in range(param.n))
    triples = tuple(
        (param.mu1 * a, param.mu1 * b, beta)
        for (a, b), beta in zip(zip(param.a, param.b), betas)
    )
    return Coefficients(
        mu1=param.mu1, eta_betas=triples, first_eta=param.c * param.mu1
    )


def precompute(
    params: Sequence[CmeParam], max_evaluations: int = DEFAULT_MAX_EVALUATIONS
) -> list[Coefficients]:
    """Build the coefficient table for evaluation counts ``0..max_evaluations-1``."""
    if max_evaluations < 0:
        raise ValueError("max_evaluations must not be negative")
    return [
        _coefficients_for(steepest(params, index)) for index in range(max_evaluations)
    ]


def dump_table(table: Iterable[Coefficients]) -> str:
    """Serialise a coefficient table to JSON."""
    entries = [entry.to_mapping() for entry in table]
    return json.dumps({"max_evaluations": len(entries), "coefficients": entries})


def load_table(text: str) -> list[Coefficients]:
    """Load a coefficient table written by :func:`dump_table`."""
    data = json.loads(text)
    if not isinstance(data, dict) or "coefficients" not in data:
        raise ValueError("coefficient table must be an object with 'coefficients'")
    table = [Coefficients.from_mapping(item) for item in data["coefficients"]]
    declared = data.get("max_evaluations", len(table))
    if declared != len(table):
        raise ValueError(
            f"table declares {declared} entries but holds {len(table)}"
        )
    return table