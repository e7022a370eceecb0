#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exception (and warning) classes for this package.

"""
import builtins


class GrimpeurException(Exception):
    pass


class ParamsError(GrimpeurException):
    pass


class SolverError(GrimpeurException):
    pass


# Multiple inheritance so that built-in and package-specific
# exceptions can be caught.

class ValueError(ParamsError, builtins.ValueError):
    pass


class TypeError(ParamsError, builtins.TypeError):
    pass


class ConvergenceWarning(SolverError, RuntimeWarning):
    """Issued when the speed search stops without meeting its tolerance."""
