"""This module contains functions for unit conversions"""

import numpy as np


def ft_to_m(f_ft: float) -> float:
    """Converts from feet to meters

    Args:
        f_ft (float): feet

    Returns:
        float: meters
    """
    g = 0.3048
    f = f_ft * g

    return f

def ft_min_to_chains_hr(f_ft_min: float) -> float:
    """Converts from ft/min to chains/hr (1 chain = 66 ft)

    Args:
        f_ft_min (float): ft/min

    Returns:
        float: chains/hr
    """
    f = (f_ft_min * 60) / 66

    return f

def ft_min_to_m_min(f_ft_min: float) -> float:
    """Converts from ft/min to m/min

    Args:
        f_ft_min (float): ft/min

    Returns:
        float: m/min
    """
    return ft_to_m(f_ft_min)

def TPA_to_Lbsft2(f_tpa: float) -> float:
    """Converts from tons/acre to lbs/ft^2

    Args:
        f_tpa (float): tons/acre

    Returns:
        float: lbs/ft^2
    """
    g = 2000 / 43560
    f = f_tpa * g

    return f

def deg_to_pct_slope(slope_deg: float) -> float:
    """Converts a slope angle in degrees to percent grade

    Args:
        slope_deg (float): slope angle in degrees

    Returns:
        float: rise over run as a percentage
    """
    return np.tan(np.deg2rad(slope_deg)) * 100
