# core/utils.py
import math
from raytracer.core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n: R = v - 2 (n . v) n.
    """
    return v - n * (2 * n.dot(v))

def rotate(v: Vector3, axis: Vector3, angle: float) -> Vector3:
    """
    Rotates v by angle (radians) around axis using Rodrigues' formula.
    A zero axis leaves v unchanged.
    """
    k = axis.normalize()
    if k.length_sq() == 0 or angle == 0:
        return v
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return v * cos_a + k.cross(v) * sin_a + k * (k.dot(v) * (1 - cos_a))

def orthonormal_basis(n: Vector3):
    """
    Builds a tangent frame (Nt, Nb) around the unit normal n. The tangent is
    derived from whichever of |n.x| and |n.y| is larger so the cross product
    never degenerates.
    """
    if abs(n.x) > abs(n.y):
        nt = Vector3(n.z, 0, -n.x) / math.sqrt(n.x * n.x + n.z * n.z)
    else:
        nt = Vector3(0, -n.z, n.y) / math.sqrt(n.y * n.y + n.z * n.z)
    nt = nt.normalize()
    nb = n.cross(nt).normalize()
    return nt, nb

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk (z = 0), used for the lens aperture."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p

def refract(v: Vector3, n: Vector3, eta: float, cosi: float):
    """
    Transmitted direction by Snell's law, with n facing the incident side,
    cosi = -v . n >= 0 and eta = etai / etat. None under total internal
    reflection.
    """
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return None
    return (v * eta + n * (eta * cosi - math.sqrt(k))).normalize()
