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
from obarec import classtools
from obarec.tensor import tensor_component

class factor(classtools.valuetools):
    """
    Symbolic multiplicative factor attached to a recursion term.

    A factor has a semantic name (used in documentation, e.g. "PA" or
    "1/eta"), a code label (the variable name used in generated code, e.g.
    "rpa" or "fe") and an optional directional shape. A factor with a
    directional shape such as factor("PA","rpa",tensor_component(1,0,0))
    denotes the Cartesian component (P-A)_x; a factor with a zero shape
    denotes a scalar.
    """
    def __init__(self,name,label,shape=None):
        assert isinstance(name,str), 'name must be a string'
        assert isinstance(label,str), 'label must be a string'
        if shape is None:
            shape = tensor_component()
        assert isinstance(shape,tensor_component), 'shape must be a tensor_component'
        self._name = name
        self._label = label
        self._shape = shape

    def __repr__(self):
        return 'factor('+repr(self._name)+','+repr(self._label)+','+repr(self._shape)+')'

    def __str__(self):
        return self.label()

    def key(self):
        return ( self._name, self._label, self._shape.key() )

    def name(self):
        return self._name

    def shape(self):
        return self._shape

    def label(self):
        """Code label, with the direction appended for directional factors."""
        if self._shape.order() > 0:
            return self._label+'_'+self._shape.label()
        return self._label
