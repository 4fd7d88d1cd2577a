"""Various sets of constants and helper functions useful throughout the codebase

.. autoclass:: TimeLagClass
    :members:

.. autoclass:: UtilFuncs
    :members:

"""

import math
import numbers

import numpy as np

from firebehavior.exceptions import ValidationError


class TimeLagClass:
    """Nominal dead fuel time-lag classes in hours.

    A fuel closes roughly 63% of the gap between its moisture and the
    equilibrium moisture content in one time-lag period.
    """
    ONE_HOUR, TEN_HOUR, HUNDRED_HOUR, THOUSAND_HOUR = 1, 10, 100, 1000

    all_classes = (ONE_HOUR, TEN_HOUR, HUNDRED_HOUR, THOUSAND_HOUR)

    # Typical fuel diameters for each class
    descriptions = {
        ONE_HOUR: "0 - 1/4 inch",
        TEN_HOUR: "1/4 - 1 inch",
        HUNDRED_HOUR: "1 - 3 inch",
        THOUSAND_HOUR: "3 - 8 inch",
    }


class UtilFuncs:
    """Various utility functions that are useful across numerous files.
    """

    @staticmethod
    def is_number(value) -> bool:
        """Check whether a value can take part in the fire behavior arithmetic.

        Booleans are rejected even though Python treats them as integers,
        and so are NaN and infinities.

        :param value: value to check
        :return: True if value is a finite, real, non-boolean number
        :rtype: bool
        """
        if isinstance(value, (bool, np.bool_)):
            return False

        return isinstance(value, numbers.Real) and math.isfinite(value)

    @staticmethod
    def check_numeric(message: str, **values):
        """Raise a :class:`ValidationError` if any keyword value is not a number.

        :param message: error message to raise with
        :type message: str
        :raises ValidationError: naming the first offending field
        """
        for name, value in values.items():
            if not UtilFuncs.is_number(value):
                raise ValidationError(message, field=name, value=value)

    @staticmethod
    def round_half_up(value: float, digits: int = 0) -> float:
        """Round to a reported precision with halves rounded up.

        Python's built-in round uses banker's rounding, so 2.5 would become 2.
        Reported fire behavior values round halves toward positive infinity.

        :param value: value to round
        :type value: float
        :param digits: number of decimal places to keep
        :type digits: int
        :return: rounded value, or `value` unchanged when it is too large
                 to carry the requested decimals
        :rtype: float
        """
        scale = 10 ** digits
        scaled = value * scale

        if not math.isfinite(scaled):
            return float(value)

        return math.floor(scaled + 0.5) / scale
