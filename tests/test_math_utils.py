import math

import pytest

from vectorsoft.math_utils import (
    EulerOrder,
    Quaternion,
    Vector3,
    angle_between,
    clamp,
    cross,
    distance,
    dot,
    elem_div,
    elem_mul,
    equals,
    from_array,
    is_zero,
    lerp,
    norm,
    normalize,
    project,
    to_array,
)

A = Vector3(1.5, -2.0, 0.75)
B = Vector3(-0.5, 3.0, 2.25)


def test_cross_is_orthogonal_to_inputs():
    c = cross(A, B)
    assert dot(c, A) == pytest.approx(0.0, abs=1e-9)
    assert dot(c, B) == pytest.approx(0.0, abs=1e-9)
    assert equals(Vector3.cross(A, B), c)


def test_cross_is_anticommutative():
    assert equals(cross(A, B), -cross(B, A))


def test_vector_arithmetic_round_trip():
    assert equals((A + B) - B, A)
    assert equals((A * 2.5) / 2.5, A)
    assert equals(2.5 * A, A * 2.5)


def test_normalize_gives_unit_vector():
    n = normalize(A)
    assert n.is_normalized()
    assert angle_between(n, A) == pytest.approx(0.0, abs=1e-6)


def test_normalize_zero_vector_returns_zero():
    assert normalize(Vector3()) == Vector3()


def test_is_finite():
    assert A.is_finite()
    assert not Vector3(math.nan, 0.0, 0.0).is_finite()
    assert not Quaternion(math.inf, 0.0, 0.0, 0.0).is_finite()


def test_elem_mul_and_div_round_trip():
    assert equals(elem_div(elem_mul(A, B), B), A)


def test_elem_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        elem_div(A, Vector3(0.0, 1.0, 1.0))


def test_angle_between_with_zero_vector_is_zero():
    assert angle_between(Vector3(), A) == 0.0


def test_angle_between_opposite_vectors_is_pi():
    assert angle_between(A, -A) == pytest.approx(math.pi)


def test_project_parallel_and_residual_orthogonal():
    p = project(A, B)
    assert norm(cross(p, B)) == pytest.approx(0.0, abs=1e-9)
    assert dot(A - p, B) == pytest.approx(0.0, abs=1e-9)


def test_project_onto_zero_vector_is_zero():
    assert project(A, Vector3()) == Vector3()


def test_distance_is_symmetric_and_matches_norm():
    assert distance(A, B) == pytest.approx(distance(B, A))
    assert distance(A, B) == pytest.approx(norm(A - B))


def test_lerp_endpoints():
    assert equals(lerp(A, B, 0.0), A)
    assert equals(lerp(A, B, 1.0), B)
    mid = lerp(A, B, 0.5)
    assert distance(A, mid) == pytest.approx(distance(mid, B))


def test_clamp_bounds_components():
    c = clamp(Vector3(5.0, -5.0, 0.25), -1.0, 1.0)
    assert to_array(c) == [1.0, -1.0, 0.25]


def test_is_zero_and_equals_tolerance():
    assert is_zero(Vector3(1e-8, -1e-8, 0.0))
    assert not is_zero(Vector3(1e-3, 0.0, 0.0))
    assert equals(A, A + Vector3(1e-3, 0.0, 0.0), eps=1e-2)
    assert not equals(A, B)


def test_array_round_trip():
    assert from_array(to_array(A)) == A


def test_from_array_too_short_raises():
    with pytest.raises(ValueError):
        from_array([1.0, 2.0])


def test_quaternion_default_is_identity():
    q = Quaternion(0.3, 0.1, -0.2, 0.4)
    assert not q.is_identity()
    q.set_identity()
    assert q.is_identity()
    assert Quaternion().is_identity()


def test_quaternion_inverse_product_is_identity():
    q = Quaternion(0.3, 0.1, -0.2, 0.4)
    assert Quaternion.multiply(q, q.inverse()).is_identity(1e-9)
    assert (q.inverse() * q).is_identity(1e-9)


def test_quaternion_inverse_of_zero_is_identity():
    assert Quaternion(0.0, 0.0, 0.0, 0.0).inverse() == Quaternion()


def test_quaternion_normalized():
    q = Quaternion(0.3, 0.1, -0.2, 0.4)
    assert q.normalized().is_normalized()
    assert Quaternion(0.0, 0.0, 0.0, 0.0).normalized() == Quaternion()
    assert Quaternion.dot(q, q) == pytest.approx(q.norm() ** 2)


def test_rotate_x_axis_about_z():
    q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), math.pi / 2)
    assert equals(q.rotate(Vector3(1.0, 0.0, 0.0)), Vector3(0.0, 1.0, 0.0))


def test_rotation_preserves_length_and_matches_matrix():
    q = Quaternion(0.3, 0.1, -0.2, 0.4).normalized()
    v = q.rotate(A)
    assert norm(v) == pytest.approx(norm(A))
    m = q.to_rotation_matrix()
    via_matrix = Vector3(*(sum(r * c for r, c in zip(row, A)) for row in m))
    assert equals(via_matrix, v, 1e-9)


def test_conjugate_undoes_rotation():
    q = Quaternion(0.3, 0.1, -0.2, 0.4).normalized()
    assert equals(q.conjugate().rotate(q.rotate(A)), A, 1e-9)


@pytest.mark.parametrize("angles", [(0.3, -0.4, 1.1), (-2.0, 0.2, 0.5), (1.0, 1.2, -2.5)])
def test_euler_zyx_round_trip(angles):
    q = Quaternion.from_euler(*angles, EulerOrder.ZYX)
    assert q.is_normalized()
    assert q.to_euler(EulerOrder.ZYX) == pytest.approx(angles)


@pytest.mark.parametrize("order", list(EulerOrder))
def test_from_euler_is_unit_for_every_order(order):
    q = Quaternion.from_euler(0.4, -0.7, 1.3, order)
    assert q.is_normalized()


def test_from_euler_zero_angles_is_identity():
    for order in EulerOrder:
        assert Quaternion.from_euler(0.0, 0.0, 0.0, order).is_identity()


def test_to_euler_gimbal_lock_clamps_pitch():
    q = Quaternion.from_euler(0.0, math.pi / 2, 0.0, EulerOrder.ZYX)
    _, pitch, _ = q.to_euler(EulerOrder.ZYX)
    assert pitch == pytest.approx(math.pi / 2, abs=1e-3)


def test_axis_angle_round_trip():
    axis = normalize(Vector3(1.0, 2.0, -0.5))
    q = Quaternion.from_axis_angle(axis, 1.2)
    out_axis, out_angle = q.to_axis_angle()
    assert out_angle == pytest.approx(1.2)
    assert equals(out_axis, axis, 1e-9)


def test_axis_angle_of_identity_defaults_to_x_axis():
    axis, angle = Quaternion().to_axis_angle()
    assert axis == Vector3(1.0, 0.0, 0.0)
    assert angle == pytest.approx(0.0)


def test_slerp_endpoints():
    q1 = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), 0.2)
    q2 = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 1.5)
    assert Quaternion.dot(Quaternion.slerp(q1, q2, 0.0), q1) == pytest.approx(1.0)
    assert Quaternion.dot(Quaternion.slerp(q1, q2, 1.0), q2) == pytest.approx(1.0)


def test_slerp_midpoint_is_half_angle():
    axis = Vector3(0.0, 0.0, 1.0)
    q1 = Quaternion()
    q2 = Quaternion.from_axis_angle(axis, 1.6)
    mid = Quaternion.slerp(q1, q2, 0.5)
    expected = Quaternion.from_axis_angle(axis, 0.8)
    assert Quaternion.dot(mid, expected) == pytest.approx(1.0)
    assert mid.is_normalized()


def test_slerp_takes_shortest_path():
    q1 = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), 0.3)
    q2 = Quaternion.from_axis_angle(Vector3(1.0, 0.0, 0.0), 0.9)
    neg_q2 = Quaternion(-q2.w, -q2.x, -q2.y, -q2.z)
    a = Quaternion.slerp(q1, q2, 0.4)
    b = Quaternion.slerp(q1, neg_q2, 0.4)
    assert Quaternion.dot(a, b) == pytest.approx(1.0)


def test_slerp_nearly_equal_uses_linear_path():
    q1 = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 0.01)
    q2 = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 0.02)
    r = Quaternion.slerp(q1, q2, 0.5)
    assert r.is_normalized()
    assert Quaternion.dot(r, Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 0.015)) == pytest.approx(1.0)