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
Cartesian angular momentum bookkeeping.

A tensor_component is the Cartesian triple ( ax, ay, az ) of a Gaussian
function (or of the tensorial shape of an operator), and a tensor is
the shell of all components with a given total order.

Components are listed in the standard order used throughout quantum
chemistry codes, e.g. for l = 2
    xx, xy, xz, yy, yz, zz
which is the ordering defined by tensor_component.__lt__ and enumerated
by cartesian_components().
"""
from obarec import classtools

AXES = 'xyz'

SHELL_LABELS = 'SPDFGHIKLMNOQRTUV'

def axis_index(axis):
    """Returns the integer index (0, 1, 2) of a Cartesian axis given as a
    label ('x', 'y', 'z') or an index."""
    if isinstance(axis,str):
        assert axis in AXES and len( axis ) == 1, 'axis must label a Cartesian direction (x, y, z)'
        return AXES.index(axis)
    assert isinstance(axis,int) and not isinstance(axis,bool), \
            "axis must be str 'x','y','z' or int 0,1,2"
    assert axis in [ 0, 1, 2 ], 'axis must label a Cartesian direction (0, 1, 2)'
    return axis

def axis_label(index):
    """Returns the label ('x', 'y', 'z') of a Cartesian axis."""
    return AXES[ axis_index(index) ]

def binomial(n,k):
    """Returns an integer binomial coefficient ( n, k ), using an iterative algorithm."""
    if n < k or k < 0:
        return 0
    r = 1
    for d in range(1, k+1):
        r = r * n // d
        n = n - 1
    return r

def figurate(n,d):
    """Return the integer figurate number f^n_d, which for d = 2 is the number
    of Cartesian components of a shell with order n - 1."""
    return binomial(n+d-1,d)

class tensor_component(classtools.valuetools):
    """Immutable Cartesian triple ( ax, ay, az ) with non-negative values."""
    def __init__(self,ax=0,ay=0,az=0):
        for value in [ ax, ay, az ]:
            assert isinstance(value,int) and not isinstance(value,bool), \
                    'tensor component values must be integers'
            assert value >= 0, 'tensor component values must be non-negative'
        self._values = ( ax, ay, az )

    def __getitem__(self,axis):
        return self._values[ axis_index(axis) ]

    def __repr__(self):
        return 'tensor_component'+str( self._values )

    def __str__(self):
        return self.label()

    def key(self):
        # Ordered by total order, then ax descending, then ay descending
        ax, ay, az = self._values
        return ( ax + ay + az, -ax, -ay, -az )

    def values(self):
        return self._values

    def order(self):
        return sum( self._values )

    def maximum(self):
        return max( self._values )

    def primary(self):
        """Returns the label of the first axis (in x, y, z order) with a nonzero
        value, or 'x' for a zero component."""
        for label, value in zip( AXES, self._values ):
            if value > 0:
                return label
        return 'x'

    def label(self):
        if self.order() == 0:
            return '0'
        return ''.join( label*value for label, value in zip( AXES, self._values ) )

    def shift(self,axis,value):
        """Returns a new tensor_component with the value along axis changed by
        value, or None if the result would have a negative value."""
        assert isinstance(value,int), 'value must be an integer'
        values = list( self._values )
        values[ axis_index(axis) ] += value
        if values[ axis_index(axis) ] < 0:
            return None
        return tensor_component( *values )

    def index(self):
        """Position of the component in the canonical listing of its shell
        (counting from 0)."""
        j = self._values[1]
        k = self._values[2]
        return (j+k+1)*(j+k)//2 + k

class tensor(classtools.valuetools):
    """A shell of Cartesian components with fixed total order."""
    def __init__(self,order):
        assert isinstance(order,int) and order >= 0, 'order must be a non-negative integer'
        self._order = order

    def __repr__(self):
        return 'tensor('+str(self._order)+')'

    def key(self):
        return ( self._order, )

    def order(self):
        return self._order

    def label(self):
        if self._order < len( SHELL_LABELS ):
            return SHELL_LABELS[ self._order ]
        return 'l'+str( self._order )

    def components(self):
        """Builds all components of the shell by successive unit shifts of
        the lower shell, returned in canonical order."""
        tcomps = set( [ tensor_component() ] )
        for i in range( self._order ):
            tcomps = set( tcomp.shift(axis,1) for tcomp in tcomps for axis in AXES )
        return sorted( tcomps )

    def size(self):
        return figurate( self._order+1, 2 )

def cartesian_components(order):
    """Returns the list of tensor_component objects with the given total order,
    in canonical order."""
    return tensor(order).components()
