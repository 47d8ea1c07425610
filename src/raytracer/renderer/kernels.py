# renderer/kernels.py
import math
from numba import njit

@njit
def fresnel_reflectance(cosi, etai, etat):
    """
    Fraction of light reflected at a dielectric boundary, as the mean of the
    squared s- and p-polarised Fresnel coefficients.

    cosi is the cosine between the incident ray and the normal on the
    incident side (non-negative); etai/etat are the indices of the medium
    the ray leaves/enters. Returns 1.0 under total internal reflection.
    """
    sint = etai / etat * math.sqrt(max(0.0, 1.0 - cosi * cosi))
    if sint >= 1.0:
        return 1.0
    cosi = abs(cosi)
    cost = math.sqrt(max(0.0, 1.0 - sint * sint))
    rs = ((etat * cosi) - (etai * cost)) / ((etat * cosi) + (etai * cost))
    rp = ((etai * cosi) - (etat * cost)) / ((etai * cosi) + (etat * cost))
    return (rs * rs + rp * rp) / 2.0

@njit
def hemisphere_sample(r1, r2):
    """
    Maps two uniform numbers in [0, 1) to a direction on the unit
    hemisphere around +y (local frame). The pdf is uniform, 1 / (2 pi).
    """
    sin_theta = math.sqrt(max(0.0, 1.0 - r1 * r1))
    phi = 2.0 * math.pi * r2
    return sin_theta * math.cos(phi), r1, sin_theta * math.sin(phi)
