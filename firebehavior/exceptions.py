"""Custom exceptions for the firebehavior package.

This module defines a hierarchy of exceptions used throughout the package
to provide clear, specific error messages and enable targeted exception
handling by callers such as a dashboard UI.

Exception Hierarchy:
    FireBehaviorError (base)
    ├── ValidationError - Missing or wrongly typed inputs
    │   └── OutOfRangeError - Numeric inputs outside their valid domain
    ├── DomainError - Inputs that would make a computation undefined
    ├── FuelModelError - Unknown fuel model identifiers
    └── ConfigurationError - Invalid prediction input parameters

Example:
    >>> from firebehavior.exceptions import OutOfRangeError
    >>> raise OutOfRangeError("Relative humidity must be between 0 and 100")
"""

from typing import Optional


class FireBehaviorError(Exception):
    """Base exception for all firebehavior errors.

    All custom exceptions in the package inherit from this class, allowing
    callers to catch every fire behavior error with a single except clause.

    Example:
        >>> try:
        ...     compute_emc(70, 150)
        ... except FireBehaviorError as e:
        ...     print(f"Calculation failed: {e}")
    """

    pass


class ValidationError(FireBehaviorError):
    """Raised when an argument is missing or of the wrong type.

    This exception is raised when:
    - Temperature or humidity are not numbers
    - A weather step sequence is not a sequence
    - A weather step is missing one of its fields

    Attributes:
        message (str): Explanation of the validation failure.
        field (str): Name of the field that failed validation, if applicable.
        value: The invalid value, if applicable.

    Example:
        >>> raise ValidationError(
        ...     "Invalid input: all parameters must be numbers",
        ...     field="time_lag_hours",
        ...     value="ten"
        ... )
    """

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        self.message = message
        self.field = field
        self.value = value

        parts = []
        if field:
            parts.append(f"field '{field}'")
        if value is not None:
            parts.append(f"value={value!r}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


# Name used by the dashboard's error taxonomy
InvalidInputError = ValidationError


class OutOfRangeError(ValidationError):
    """Raised when a numeric argument lies outside its valid domain.

    Example:
        >>> raise OutOfRangeError(
        ...     "Relative humidity must be between 0 and 100",
        ...     field="rh",
        ...     value=150
        ... )
    """

    pass


class DomainError(FireBehaviorError):
    """Raised when a structurally valid argument makes a formula undefined.

    The time-lag constant divides the elapsed time in the moisture decay
    exponent, so a non-positive value has no meaning.

    Attributes:
        message (str): Explanation of the domain error.
        value: The offending value, if applicable.
    """

    def __init__(self, message: str, value=None):
        self.message = message
        self.value = value

        if value is not None:
            full_message = f"{message} (value={value!r})"
        else:
            full_message = message

        super().__init__(full_message)


class FuelModelError(FireBehaviorError):
    """Raised when fuel model operations fail.

    This exception is raised when:
    - An unknown fuel model ID is specified
    - A fuel model ID is a boolean or a non-integral number

    Attributes:
        message (str): Explanation of the fuel model error.
        fuel_model_id: The fuel model ID involved, if applicable.

    Example:
        >>> raise FuelModelError(
        ...     "Invalid fuel model",
        ...     fuel_model_id='99'
        ... )
    """

    def __init__(self, message: str, fuel_model_id=None):
        self.message = message
        self.fuel_model_id = fuel_model_id

        if fuel_model_id is not None:
            full_message = f"{message} (fuel model ID: {fuel_model_id})"
        else:
            full_message = message

        super().__init__(full_message)


class ConfigurationError(FireBehaviorError):
    """Raised when fire behavior prediction inputs are invalid.

    This exception is raised when:
    - A prediction input mapping carries an unknown key
    - A parameter cannot be interpreted

    Attributes:
        message (str): Explanation of the configuration error.
        parameter (str): Name of the problematic parameter, if applicable.
    """

    def __init__(self, message: str, parameter: Optional[str] = None):
        self.message = message
        self.parameter = parameter

        if parameter:
            full_message = f"{message} (parameter '{parameter}')"
        else:
            full_message = message

        super().__init__(full_message)
