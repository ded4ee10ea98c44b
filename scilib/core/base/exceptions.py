"""
Exception hierarchy for scilib.

This module defines all custom exceptions used throughout the package,
providing clear error messages and proper inheritance structure.
"""

from typing import Optional, Any, Dict


class ScilibError(Exception):
    """Base exception for all scilib errors.
    
    This is the root exception class that all other scilib exceptions
    inherit from. It provides enhanced error reporting with optional
    context information.
    """
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, 
                 cause: Optional[Exception] = None):
        """Initialize scilib error.
        
        Parameters
        ----------
        message : str
            Primary error message
        details : dict, optional
            Additional context information
        cause : Exception, optional
            Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause
    
    def __str__(self) -> str:
        """String representation of the error."""
        base_msg = self.message
        
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            base_msg += f" (Details: {details_str})"
        
        if self.cause:
            base_msg += f" (Caused by: {self.cause})"
        
        return base_msg
    
    def add_detail(self, key: str, value: Any) -> "ScilibError":
        """Add detail information to the error.
        
        Returns
        -------
        ScilibError
            Self for method chaining
        """
        self.details[key] = value
        return self
    
    def get_detail(self, key: str, default: Any = None) -> Any:
        """Get detail information from the error, or ``default`` if missing."""
        return self.details.get(key, default)


class ValidationError(ScilibError):
    """Raised when input data doesn't meet the required criteria or format."""
    
    def __init__(self, message: str, field: Optional[str] = None, 
                 value: Optional[Any] = None, **kwargs):
        """Initialize validation error.
        
        Parameters
        ----------
        message : str
            Validation error message
        field : str, optional
            Name of the field that failed validation
        value : Any, optional
            Value that failed validation
        **kwargs
            Additional arguments for base class
        """
        details = kwargs.pop('details', {})
        if field is not None:
            details['field'] = field
        if value is not None:
            details['value'] = value
        
        super().__init__(message, details=details, **kwargs)
        self.field = field
        self.value = value


class ConfigurationError(ScilibError):
    """Raised when configuration is invalid or missing.
    
    This exception is used for configuration-related errors such as
    invalid values or malformed config files.
    """
    
    def __init__(self, message: str, config_file: Optional[str] = None,
                 parameter: Optional[str] = None, **kwargs):
        details = kwargs.pop('details', {})
        if config_file is not None:
            details['config_file'] = config_file
        if parameter is not None:
            details['parameter'] = parameter
        
        super().__init__(message, details=details, **kwargs)
        self.config_file = config_file
        self.parameter = parameter


class StatisticsError(ScilibError):
    """Raised when a statistical computation over a series fails."""
    
    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        """Initialize statistics error.
        
        Parameters
        ----------
        message : str
            Statistics error message
        operation : str, optional
            Name of the statistical operation that failed
        **kwargs
            Additional arguments for base class
        """
        details = kwargs.pop('details', {})
        if operation is not None:
            details['operation'] = operation
        
        super().__init__(message, details=details, **kwargs)
        self.operation = operation


class EmptyInputError(StatisticsError, ValueError):
    """Raised when a statistic is requested over a zero-length series."""


class LengthMismatchError(StatisticsError, ValueError):
    """Raised when two series that must be paired differ in length."""
    
    def __init__(self, message: str, length_x: Optional[int] = None,
                 length_y: Optional[int] = None, **kwargs):
        details = kwargs.pop('details', {})
        if length_x is not None:
            details['length_x'] = length_x
        if length_y is not None:
            details['length_y'] = length_y
        
        super().__init__(message, details=details, **kwargs)
        self.length_x = length_x
        self.length_y = length_y


class DegenerateRangeError(StatisticsError, ValueError):
    """Raised when a series has no spread (all elements equal)."""


class GeometryError(ScilibError):
    """Raised when a coordinate operation fails."""


class DivideByZeroError(GeometryError, ZeroDivisionError):
    """Raised when a coordinate is divided by a zero scalar."""
