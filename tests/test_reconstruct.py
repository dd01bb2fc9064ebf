"""Tests for constant-term reconstruction."""

import logging

import pytest

from core.errors import ErrorKind, InsufficientPoints, SingularMatrix
from core.fraction import Fraction
from core.polynomial import Polynomial
from shares.document import SharePoint, load_document, parse_document
from shares.reconstruct import (
    ORDER_AS_GIVEN, ORDER_BY_X, build_matrix, reconstruct, reconstruct_points,
    select_points,
)
from tests.utils import make_document, make_points, sample_path


def test_sample_document():
    result = reconstruct(load_document(sample_path("testcase1.json")))
    assert result.secret == 3
    assert result.is_integral
    assert result.coefficients == [1, 0, 3]
    assert [p.x for p in result.used] == [1, 2, 3]
    assert result.inconsistent == []


def test_interpolation_example():
    points = make_points([1, 2, 3], [1, 2, 3])
    result = reconstruct_points(points, 3)
    assert result.coefficients == [3, 2, 1]
    assert result.constant == 1
    assert result.secret == 1


def test_build_matrix():
    points = [SharePoint(2, 9), SharePoint(3, 20)]
    assert build_matrix(points) == [[2, 1, 9], [3, 1, 20]]


def test_select_sorts_by_x():
    points = [SharePoint(6, 0), SharePoint(1, 0), SharePoint(3, 0), SharePoint(2, 0)]
    assert [p.x for p in select_points(points, 3)] == [1, 2, 3]


def test_select_document_order():
    points = [SharePoint(6, 0), SharePoint(1, 0), SharePoint(3, 0), SharePoint(2, 0)]
    assert [p.x for p in select_points(points, 3, ORDER_AS_GIVEN)] == [6, 1, 3]


def test_select_unknown_order():
    with pytest.raises(ValueError):
        select_points([SharePoint(1, 1)], 1, "random")


def test_select_k_must_be_positive():
    with pytest.raises(ValueError):
        select_points([SharePoint(1, 1)], 0)


def test_insufficient_points():
    with pytest.raises(InsufficientPoints) as exc:
        reconstruct_points([SharePoint(1, 1), SharePoint(2, 2)], 3)
    assert exc.value.required == 3
    assert exc.value.available == 2
    assert exc.value.kind is ErrorKind.INSUFFICIENT_POINTS


def test_fractional_constant_warns(caplog):
    # (1, 1), (3, 2) lie on x/2 + 1/2
    points = [SharePoint(1, 1), SharePoint(3, 2)]
    with caplog.at_level(logging.WARNING, logger="shares.reconstruct"):
        result = reconstruct_points(points, 2)
    assert result.constant == Fraction(1, 2)
    assert not result.is_integral
    assert result.secret == 1
    assert "fractional" in caplog.text


def test_integral_zero_constant():
    # f(x) = x/2 at even x has constant term 0/1
    result = reconstruct_points([SharePoint(2, 1), SharePoint(4, 2)], 2)
    assert result.constant == 0
    assert result.is_integral
    assert result.coefficients == [Fraction(1, 2), 0]


def test_order_changes_result_with_corrupted_share(caplog):
    doc = {
        "keys": {"n": 4, "k": 3},
        "6": {"base": "4", "value": "220"},  # 40, off by one
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
    }
    document = parse_document(doc)

    by_x = reconstruct(document, order=ORDER_BY_X)
    assert by_x.secret == 3
    assert by_x.inconsistent == [6]

    with caplog.at_level(logging.WARNING, logger="shares.reconstruct"):
        as_given = reconstruct(document, order=ORDER_AS_GIVEN)
    assert as_given.constant == Fraction(31, 10)
    assert as_given.secret == 31
    assert not as_given.is_integral
    assert as_given.inconsistent == [3]
    assert "do not lie" in caplog.text


def test_duplicate_x_is_singular():
    with pytest.raises(SingularMatrix):
        reconstruct_points([SharePoint(1, 2), SharePoint(1, 2)], 2)


def test_big_values():
    coeffs = [2 ** 300 + 7, -(3 ** 150), 5 ** 90, 11 ** 70, 2 ** 255 - 19, 1]
    doc = make_document(coeffs, range(1, 10), [2, 7, 16, 36, 10])
    result = reconstruct(parse_document(doc))
    assert result.secret == coeffs[0]
    assert result.is_integral
    assert result.coefficients == list(reversed(coeffs))
    assert result.inconsistent == []


def test_negative_secret():
    coeffs = [-12345, 17, 4]
    doc = make_document(coeffs, [2, 5, 9, 11], [3, 36])
    assert reconstruct(parse_document(doc)).secret == -12345


def test_agrees_with_lagrange():
    coeffs = [987654321, 13, -8, 21]
    points = make_points(coeffs, [-4, 2, 7, 10])
    result = reconstruct_points(points, 4)
    assert result.constant == Polynomial.interpolate_at_zero([(p.x, p.y) for p in points])


def test_k_one_uses_single_point():
    result = reconstruct_points([SharePoint(5, 77), SharePoint(9, 78)], 1)
    assert result.secret == 77
    assert result.inconsistent == [9]


def test_polynomial_property():
    result = reconstruct_points(make_points([4, 0, 1], [1, 2, 3]), 3)
    assert result.polynomial.evaluate(10) == 104
