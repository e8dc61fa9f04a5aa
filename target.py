import numpy as np

# target function and its derivative
def f(x):
    """Evaluate e^sin(x) * atan(2 x^2) (scalar or array)."""
    return np.power(np.e, np.sin(x)) * np.arctan(2 * x * x)

def df(x, h):
    """Forward difference of f with step h."""
    return (f(x + h) - f(x)) / h
