"""
Sheet metal part pricer.

Geometry resolver + pricing engine for flat laser/plasma-cut parts. Pure
Python math: dimensions in, area/cut-length/preview shapes and a tiered price out.
"""
