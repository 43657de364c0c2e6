"""Covariance module."""

from steinshrink.covariance._stein_shrinkage import SteinShrinkageCovariance

__all__ = ["SteinShrinkageCovariance"]
