"""
Temperature and time dependent spring constant of a steel rod.

k(T, t) = E(T) * exp(-lambda * t) * A(T) / L(T)
"""
