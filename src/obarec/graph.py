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
from obarec.group import recursion_group
from obarec.supporting_functions import topological_sort

class recursion_graph(classtools.classtools):
    """
    Directed acyclic graph of recursion groups.

    Each vertex is a recursion_group (normally all components of one
    integral class) and edges run from a vertex to the vertices holding the
    integrals its expansion refers to. The graph is used for recursions
    where intermediate integral classes are shared between several parents,
    e.g. the electron repulsion integrals over four centers.
    """
    def __init__(self,vertex=None):
        self._vertices = []
        self._edges = []
        if vertex is not None:
            assert isinstance(vertex,recursion_group), 'vertex must be a recursion_group'
            self._vertices.append( vertex )
            self._edges.append( set() )

    def __repr__(self):
        return 'recursion_graph('+str(len(self._vertices))+' vertices)'

    def __getitem__(self,index):
        return self._vertices[index]

    def __eq__(self,other):
        if not isinstance(other,recursion_graph):
            return NotImplemented
        return self._vertices == other._vertices and self._edges == other._edges

    __hash__ = None

    def vertices(self):
        """Number of vertices."""
        return len( self._vertices )

    def edges(self,index):
        """Sorted list of the indexes of the children of vertex index."""
        return sorted( self._edges[index] )

    def find(self,vertex):
        """Index of a vertex equal to vertex, or None."""
        for i, v in enumerate( self._vertices ):
            if v == vertex:
                return i
        return None

    def add(self,vertex,root):
        """
        Adds vertex as a child of root and returns its index. root is either
        the index of an existing vertex or a vertex equal to an existing one.
        If an equal vertex is already present it is reused.
        """
        assert isinstance(vertex,recursion_group), 'vertex must be a recursion_group'
        if isinstance(root,int):
            assert 0 <= root < len( self._vertices ), 'root index out of range'
            iroot = root
        else:
            iroot = self.find(root)
            assert iroot is not None, 'root must be a vertex of the graph'
        ivertex = self.find(vertex)
        if ivertex is None:
            ivertex = len( self._vertices )
            self._vertices.append( vertex )
            self._edges.append( set() )
        self._edges[iroot].add( ivertex )
        return ivertex

    def replace(self,vertex,index):
        assert isinstance(vertex,recursion_group), 'vertex must be a recursion_group'
        self._vertices[index] = vertex

    def invert(self):
        """Returns a graph with the vertex order reversed and all edges
        pointing in the opposite direction."""
        nverts = len( self._vertices )
        graph = recursion_graph()
        graph._vertices = list( reversed( self._vertices ) )
        graph._edges = [ set() for i in range( nverts ) ]
        for i in range( nverts ):
            for j in self._edges[i]:
                graph._edges[ nverts-j-1 ].add( nverts-i-1 )
        return graph

    def orphans(self):
        """Indexes of the vertices which hold unexpanded distributions."""
        return [ i for i, v in enumerate( self._vertices ) if v.empty() ]

    def reduce(self):
        """
        Merges vertices with the same base integral class, which arise when
        the same intermediate class is required by different parents. The
        distributions of merged vertices are combined, edges are redirected
        to the merged vertex and self-references are dropped.
        """
        mapping = []
        new_vertices = []
        index_by_base = {}
        for vertex in self._vertices:
            base = vertex.base()
            if base in index_by_base:
                new_vertices[ index_by_base[base] ].merge( vertex )
            else:
                index_by_base[base] = len( new_vertices )
                new_vertices.append( vertex )
            mapping.append( index_by_base[base] )
        new_edges = [ set() for v in new_vertices ]
        for i, edges in enumerate( self._edges ):
            for j in edges:
                if mapping[i] != mapping[j]:
                    new_edges[ mapping[i] ].add( mapping[j] )
        self._vertices = new_vertices
        self._edges = new_edges

    def sort(self,child_first=True):
        """
        Reorders the vertices topologically. With child_first = True every
        vertex is placed after all of its children, which is the order in
        which the corresponding integrals have to be computed.
        """
        order = topological_sort( self._edges )
        if not child_first:
            order.reverse()
        new_index = { old : new for new, old in enumerate( order ) }
        self._vertices = [ self._vertices[old] for old in order ]
        self._edges = [ set( new_index[j] for j in self._edges[old] ) for old in order ]
