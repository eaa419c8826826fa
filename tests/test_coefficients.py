import json

import pytest

from cmeinverse.coefficients import (
    CmeParam,
    Coefficients,
    dump_table,
    load_table,
    parse_params,
    precompute,
    steepest,
)


def _param(n, cv2, mu1=1.0, omega=1.0, c=0.5):
    return CmeParam(
        n=n,
        a=tuple(float(i + 1) for i in range(n)),
        b=tuple(float(-(i + 1)) for i in range(n)),
        c=c,
        omega=omega,
        mu1=mu1,
        cv2=cv2,
    )


@pytest.fixture
def params():
    return [_param(1, 0.5), _param(3, 0.1), _param(5, 0.01)]


def test_param_mapping_round_trip():
    param = _param(2, 0.25, mu1=1.5, omega=2.5)
    assert CmeParam.from_mapping(param.to_mapping()) == param


def test_param_from_mapping_ignores_extra_keys():
    data = _param(1, 0.3).to_mapping()
    data["extra"] = "ignored"
    assert CmeParam.from_mapping(data) == _param(1, 0.3)


def test_param_missing_key_raises():
    data = _param(1, 0.3).to_mapping()
    del data["omega"]
    with pytest.raises(ValueError):
        CmeParam.from_mapping(data)


def test_parse_params(params):
    text = json.dumps([p.to_mapping() for p in params])
    assert parse_params(text) == params


def test_parse_params_requires_array():
    with pytest.raises(ValueError):
        parse_params('{"n": 1}')


def test_parse_params_invalid_json():
    with pytest.raises(ValueError):
        parse_params("[")


@pytest.mark.parametrize(
    "index, expected",
    [(0, 0), (1, 0), (3, 0), (4, 1), (5, 1), (6, 2), (100, 2)],
)
def test_steepest(params, index, expected):
    assert steepest(params, index) is params[expected]


def test_steepest_keeps_first_even_if_too_large():
    first = _param(10, 0.9)
    assert steepest([first, _param(20, 0.1)], 0) is first


def test_steepest_prefers_lower_cv2_only():
    worse = _param(1, 0.8)
    assert steepest([_param(1, 0.5), worse], 10).cv2 == 0.5


def test_steepest_empty():
    with pytest.raises(ValueError):
        steepest([], 3)


def test_precompute_length(params):
    table = precompute(params, 12)
    assert len(table) == 12


def test_precompute_negative():
    with pytest.raises(ValueError):
        precompute([_param(1, 0.5)], -1)


def test_precompute_entry_sizes(params):
    table = precompute(params, 8)
    sizes = [len(entry.eta_betas) for entry in table]
    assert sizes == [1, 1, 1, 1, 3, 3, 5, 5]


def test_precompute_unit_scale_uses_a_b_directly():
    param = _param(3, 0.1)
    (entry,) = precompute([param], 1)
    assert [(re, im) for re, im, _ in entry.eta_betas] == list(zip(param.a, param.b))
    assert entry.first_eta == param.c
    assert entry.mu1 == param.mu1


def test_precompute_betas_increase_by_omega():
    param = _param(4, 0.1, omega=1.0)
    (entry,) = precompute([param], 1)
    betas = [beta for _, _, beta in entry.eta_betas]
    assert betas == [1.0, 2.0, 3.0, 4.0]


def test_precompute_scales_with_mu1():
    unit = precompute([_param(3, 0.1, mu1=1.0, omega=0.75)], 1)[0]
    doubled = precompute([_param(3, 0.1, mu1=2.0, omega=0.75)], 1)[0]
    assert doubled.first_eta == 2 * unit.first_eta
    for u, d in zip(unit.eta_betas, doubled.eta_betas):
        assert d == tuple(2 * x for x in u)


def test_precompute_truncates_to_shortest():
    param = CmeParam(n=5, a=(1.0, 2.0), b=(3.0, 4.0, 5.0), c=1.0, omega=1.0, mu1=1.0, cv2=0.1)
    (entry,) = precompute([param], 1)
    assert len(entry.eta_betas) == len(param.a)


def test_coefficients_mapping_round_trip():
    entry = Coefficients(mu1=1.25, eta_betas=((0.5, -0.5, 3.0),), first_eta=0.75)
    assert Coefficients.from_mapping(entry.to_mapping()) == entry


def test_coefficients_bad_triple():
    with pytest.raises(ValueError):
        Coefficients.from_mapping({"mu1": 1.0, "eta_betas": [[1.0, 2.0]], "first_eta": 1.0})


def test_table_round_trip(params):
    table = precompute(params, 9)
    assert load_table(dump_table(table)) == table


def test_load_table_count_mismatch(params):
    data = json.loads(dump_table(precompute(params, 3)))
    data["max_evaluations"] = 4
    with pytest.raises(ValueError):
        load_table(json.dumps(data))


def test_load_table_requires_object():
    with pytest.raises(ValueError):
        load_table("[]")