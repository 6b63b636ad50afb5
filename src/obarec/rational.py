#!/usr/bin/env python3
### LICENSE INFORMATION
### This file is part of Obarec, a molecular integral recursion compiler
### Copyright (C) 2016 James C. Womack
### 
### Obarec is free software: you can redistribute it and/or modify
### it under the terms of the GNU General Public License as published by
### the Free Software Foundation, either version 3 of the License, or
### (at your option) any later version.
### 
### Obarec is distributed in the hope that it will be useful,
### but WITHOUT ANY WARRANTY; without even the implied warranty of
### MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
### GNU General Public License for more details.
### 
### You should have received a copy of the GNU General Public License
### along with Obarec.  If not, see <http://www.gnu.org/licenses/>.
### 
### See the file named LICENSE for full details.
"""
Exact rational prefactors for recursion terms.

Terms with the same integral and factors are merged by summing their
prefactors, so the arithmetic has to be exact: contributions which cancel
must give exactly zero. The standard library Fraction type is used
directly; this module adds the conversions needed when prefactors are
written out as source code.
"""
from fractions import Fraction

def rational(numerator,denominator=1):
    """Returns the reduced rational numerator / denominator."""
    assert isinstance(numerator,(int,Fraction)), 'numerator must be an integer or Fraction'
    assert isinstance(denominator,(int,Fraction)), 'denominator must be an integer or Fraction'
    assert denominator != 0, 'denominator must be nonzero'
    return Fraction(numerator,denominator)

def rational_label(f):
    """Label of a rational prefactor, "n.0" or "n.0 / d.0"."""
    f = Fraction(f)
    if f.denominator == 1:
        return str( f.numerator )+'.0'
    return str( f.numerator )+'.0 / '+str( f.denominator )+'.0'

def rational_literal(f):
    """
    Decimal literal for a rational prefactor.

    The decimal expansion is exact when the denominator contains only the
    prime factors 2 and 5 (e.g. 1/2 -> "0.5", -3/8 -> "-0.375"), otherwise
    the literal is written as a quotient (e.g. 1/3 -> "1.0 / 3.0").
    """
    f = Fraction(f)
    d = f.denominator
    digits = 0
    while d % 10 == 0:
        d //= 10
        digits += 1
    twos = fives = 0
    while d % 2 == 0:
        d //= 2
        twos += 1
    while d % 5 == 0:
        d //= 5
        fives += 1
    if d != 1:
        return rational_label(f)
    digits += max( twos, fives )
    if digits == 0:
        return str( f.numerator )+'.0'
    scaled = abs( f.numerator ) * 10**digits // f.denominator
    whole, part = divmod( scaled, 10**digits )
    sign = '-' if f < 0 else ''
    return sign + str(whole) + '.' + str(part).rjust(digits,'0')
