"""Vector, quaternion and matrix helpers for the game's 3D math.

Conventions follow a left-handed, row-vector system: a point ``v`` is
transformed by a matrix ``m`` as ``v @ m``, and quaternions are stored as
``(x, y, z, w)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]

_SLERP_ONE_MINUS_EPSILON = 1.0 - 0.00001


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, texture coordinate, normal and tangent."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    tangent: tuple[float, float, float] = (0.0, 0.0, 0.0)


def _vec(v: ArrayLike) -> np.ndarray:
    return np.asarray(v, dtype=float)


def dot(a: ArrayLike, b: ArrayLike) -> float:
    """Dot product of two vectors of equal length."""
    return float(np.dot(_vec(a), _vec(b)))


def cross(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Cross product of the first three components of two vectors."""
    return np.cross(_vec(a)[:3], _vec(b)[:3])


def length(v: ArrayLike) -> float:
    """Euclidean length of a vector."""
    return float(np.linalg.norm(_vec(v)))


def normalize(v: ArrayLike) -> np.ndarray:
    """Unit vector in the direction of ``v``; a zero vector stays zero."""
    arr = _vec(v)
    norm = np.linalg.norm(arr)
    if norm > 0.0:
        return arr / norm
    return np.zeros_like(arr)


def lerp(a, b, t: float):
    """Linear interpolation from ``a`` to ``b``; works on scalars and vectors."""
    start = _vec(a)
    result = start + (_vec(b) - start) * t
    if result.ndim == 0:
        return float(result)
    return result


def quaternion_from_euler_degrees(x: float, y: float, z: float) -> np.ndarray:
    """Quaternion for pitch ``x``, yaw ``y`` and roll ``z`` given in degrees.

    Roll is applied first, then pitch, then yaw.
    """
    pitch, yaw, roll = (math.radians(angle) * 0.5 for angle in (x, y, z))
    sp, cp = math.sin(pitch), math.cos(pitch)
    sy, cy = math.sin(yaw), math.cos(yaw)
    sr, cr = math.sin(roll), math.cos(roll)
    return np.array(
        [
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            sr * cp * cy - cr * sp * sy,
            cr * cp * cy + sr * sp * sy,
        ]
    )


def _hamilton(p: np.ndarray, q: np.ndarray) -> np.ndarray:
    pv, pw = p[:3], p[3]
    qv, qw = q[:3], q[3]
    vector = pw * qv + qw * pv + np.cross(pv, qv)
    scalar = pw * qw - np.dot(pv, qv)
    return np.array([vector[0], vector[1], vector[2], scalar])


def quaternion_multiply(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Compose two rotations: the result rotates by ``a`` and then by ``b``."""
    return _hamilton(_vec(b), _vec(a))


def quaternion_slerp(a: ArrayLike, b: ArrayLike, t: float) -> np.ndarray:
    """Spherical interpolation from ``a`` to ``b`` along the shorter arc."""
    q0, q1 = _vec(a), _vec(b)
    cos_omega = float(np.dot(q0, q1))
    sign = 1.0
    if cos_omega < 0.0:
        cos_omega = -cos_omega
        sign = -1.0
    if cos_omega < _SLERP_ONE_MINUS_EPSILON:
        sin_omega = math.sqrt(1.0 - cos_omega * cos_omega)
        omega = math.atan2(sin_omega, cos_omega)
        s0 = math.sin((1.0 - t) * omega) / sin_omega
        s1 = math.sin(t * omega) / sin_omega
    else:
        s0 = 1.0 - t
        s1 = t
    return q0 * s0 + q1 * (s1 * sign)


def rotate_vector(v: ArrayLike, q: ArrayLike) -> np.ndarray:
    """Rotate the 3D vector ``v`` by the quaternion ``q``."""
    quat = _vec(q)
    pure = np.append(_vec(v)[:3], 0.0)
    conjugate = np.array([-quat[0], -quat[1], -quat[2], quat[3]])
    return _hamilton(_hamilton(quat, pure), conjugate)[:3]


def _rotation_matrix(q: np.ndarray) -> np.ndarray:
    x, y, z, w = q
    return np.array(
        [
            [1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * z * w, 2 * x * z - 2 * y * w, 0.0],
            [2 * x * y - 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * x * w, 0.0],
            [2 * x * z + 2 * y * w, 2 * y * z - 2 * x * w, 1 - 2 * x * x - 2 * y * y, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def matrix_from_srt(scale: ArrayLike, rotation: ArrayLike, translation: ArrayLike) -> np.ndarray:
    """Row-vector world matrix: scale, then rotate by a quaternion, then translate."""
    scaling = np.diag(np.append(_vec(scale)[:3], 1.0))
    translating = np.identity(4)
    translating[3, :3] = _vec(translation)[:3]
    return scaling @ _rotation_matrix(_vec(rotation)) @ translating


def transform4(v: ArrayLike, m: ArrayLike) -> np.ndarray:
    """Transform a row vector by a 4x4 matrix; a 3D vector gets ``w = 0``."""
    arr = _vec(v)
    if arr.shape[0] == 3:
        arr = np.append(arr, 0.0)
    return arr @ _vec(m)


def look_to_lh(eye: ArrayLike, direction: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Left-handed view matrix for a viewer at ``eye`` looking along ``direction``."""
    eye_v = _vec(eye)[:3]
    r2 = normalize(_vec(direction)[:3])
    r0 = normalize(np.cross(_vec(up)[:3], r2))
    r1 = np.cross(r2, r0)
    neg_eye = -eye_v
    view = np.identity(4)
    view[:3, 0] = r0
    view[:3, 1] = r1
    view[:3, 2] = r2
    view[3, :3] = [np.dot(r0, neg_eye), np.dot(r1, neg_eye), np.dot(r2, neg_eye)]
    return view


def look_at_lh(eye: ArrayLike, focus: ArrayLike, up: ArrayLike) -> np.ndarray:
    """Left-handed view matrix for a viewer at ``eye`` looking at ``focus``."""
    return look_to_lh(eye, _vec(focus)[:3] - _vec(eye)[:3], up)


def perspective_fov_lh(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth ``near..far`` to ``0..1``."""
    if near <= 0.0 or far <= 0.0:
        raise ValueError("clip plane distances must be positive")
    if math.isclose(near, far):
        raise ValueError("near and far clip planes must differ")
    if math.isclose(fov, 0.0, abs_tol=1e-5):
        raise ValueError("field of view must not be zero")
    if math.isclose(aspect, 0.0, abs_tol=1e-5):
        raise ValueError("aspect ratio must not be zero")
    height = math.cos(fov * 0.5) / math.sin(fov * 0.5)
    width = height / aspect
    depth = far / (far - near)
    return np.array(
        [
            [width, 0.0, 0.0, 0.0],
            [0.0, height, 0.0, 0.0],
            [0.0, 0.0, depth, 1.0],
            [0.0, 0.0, -depth * near, 0.0],
        ]
    )


def matrix_to_quaternion(m: ArrayLike) -> np.ndarray:
    """Quaternion for the rotation held in the upper 3x3 block of ``m``."""
    mat = _vec(m)
    r22 = mat[2, 2]
    if r22 <= 0.0:
        dif10 = mat[1, 1] - mat[0, 0]
        omr22 = 1.0 - r22
        if dif10 <= 0.0:
            four_sq = omr22 - dif10
            inv = 0.5 / math.sqrt(four_sq)
            return np.array(
                [
                    four_sq * inv,
                    (mat[0, 1] + mat[1, 0]) * inv,
                    (mat[0, 2] + mat[2, 0]) * inv,
                    (mat[1, 2] - mat[2, 1]) * inv,
                ]
            )
        four_sq = omr22 + dif10
        inv = 0.5 / math.sqrt(four_sq)
        return np.array(
            [
                (mat[0, 1] + mat[1, 0]) * inv,
                four_sq * inv,
                (mat[1, 2] + mat[2, 1]) * inv,
                (mat[2, 0] - mat[0, 2]) * inv,
            ]
        )
    sum10 = mat[1, 1] + mat[0, 0]
    opr22 = 1.0 + r22
    if sum10 <= 0.0:
        four_sq = opr22 - sum10
        inv = 0.5 / math.sqrt(four_sq)
        return np.array(
            [
                (mat[0, 2] + mat[2, 0]) * inv,
                (mat[1, 2] + mat[2, 1]) * inv,
                four_sq * inv,
                (mat[0, 1] - mat[1, 0]) * inv,
            ]
        )
    four_sq = opr22 + sum10
    inv = 0.5 / math.sqrt(four_sq)
    return np.array(
        [
            (mat[1, 2] - mat[2, 1]) * inv,
            (mat[2, 0] - mat[0, 2]) * inv,
            (mat[0, 1] - mat[1, 0]) * inv,
            four_sq * inv,
        ]
    )