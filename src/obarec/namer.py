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

class namer(classtools.classtools):
    """
    Assigns short unique names to objects which are written out by the
    emitters, e.g. the buffers holding the integrals of each integral class:
        buffer_1, buffer_2, ...
    Objects are counted per prefix() and class, so that objects of
    different kinds with the same prefix are numbered independently.
    Equal objects receive the same name.
    """
    def __init__(self,separator='_',default_suffix=''):
        self._separator = separator
        self._default_suffix = default_suffix
        self._counter_dict = {}
        self._names = {}

    def __call__(self,obj):
        assert isinstance( obj.prefix(), str ), 'prefix() must return a string'
        key = ( obj.prefix(), obj.__class__.__name__ )
        if ( key, obj ) in self._names:
            return self._names[ ( key, obj ) ]
        self._counter_dict[key] = self._counter_dict.get(key,0) + 1
        out = []
        out.append( obj.prefix() )
        out.append( self._separator )
        out.append( str( self._counter_dict[key] ) )
        out.append( self._default_suffix )
        name = ''.join(out)
        self._names[ ( key, obj ) ] = name
        return name

    def names(self):
        """Number of objects named so far."""
        return len( self._names )

    def reset_counters(self):
        """Forgets all names and restarts numbering."""
        self._counter_dict = {}
        self._names = {}
