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
Provides the generator class, which expands the recursions for a list of
requested integral classes and writes them out through the reference
emitter, and its supporting classes.

classes:
    generator_options   -- user-configurable settings of generator
    recursion_request   -- one integral class to be expanded
    generator           -- expands requests into recursion groups and graphs

functions:
    create_recursion    -- recursion group for a batch of integral components
    read_requests       -- list of recursion_request objects from a JSON file
"""
import sys

from obarec import classtools
from obarec.obarec_info import prog_unit_info, obarec_info
from obarec.timer import context_timer
from obarec.read_json import read_json
from obarec.supporting_functions import isinstance_list
from obarec.integral import integral_class
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution
from obarec.group import recursion_group, group_container
from obarec.errors import UnknownFamilyError
from obarec.families import find_family
from obarec.drivers import center_derivative_driver, four_center_electron_repulsion_driver, ERI_INTEGRAND
from obarec.printer import printer
from obarec.generator.emitter import recursion_emitter

emitter_info = prog_unit_info(\
                    unit_name_str = "Recursion emitter",\
                    unit_desc_str = "plain text",\
                    version_str   = obarec_info.version_str(),\
                    author_str    = obarec_info.author_str(),\
                    license_str   = obarec_info.license_str() \
                )

_center_driver = center_derivative_driver()

def create_recursion(integrand,components,simplify=True):
    """
    Returns the recursion_group expanding each of components, which must
    all have the operator named integrand and belong to the same operator
    family. Geometric derivative prefixes are removed first, then the
    recursion of the family is applied.

    UnknownFamilyError is raised for unknown integrands and for batches
    mixing several families.
    """
    components = list( components )
    assert len( components ) > 0, 'at least one integral component is required'
    family = None
    for component in components:
        if component.integrand().name() != integrand:
            raise UnknownFamilyError('Integral component '+component.label()+\
                    ' does not have integrand '+integrand,component)
        component_family = find_family(component)
        if family is None:
            family = component_family
        elif component_family is not family:
            raise UnknownFamilyError('Integral components of the families '+family.name()+\
                    ' and '+component_family.name()+' cannot be expanded together',component)
    group = recursion_group()
    for component in components:
        group.add( recursion_distribution( recursion_term(component) ) )
    for component in components:
        if not component.prefixes().empty():
            group = _center_driver.apply_group(group)
            break
    group = family.driver().apply_group(group)
    if simplify:
        group.simplify()
    return group

class generator_options(classtools.classtools):
    """
    Instances of generator_options carry data relating to the functioning
    of instances of generator.

    If __init__() is called without arguments, a set of sane defaults is
    used, otherwise these can be set with keyword arguments.
    """
    def __init__(self, silent = None, stdout_width = None, simplify = None, \
                    max_angular_momentum = None, max_derivative_order = None, \
                    build_graphs = None ):
        """
        silent:                 if True, generator does not output status to sys.stdout
                                (default: False)
        stdout_width:           width of status messages to stdout (default: 80)
        simplify:               if True, expansions are simplified (default: True)
        max_angular_momentum:   largest angular momentum accepted on any center
                                (default: 6)
        max_derivative_order:   largest geometric derivative order accepted on any
                                center (default: 2)
        build_graphs:           if True, recursion graphs are also built for four-center
                                electron repulsion requests (default: False)
        """
        self._silent = self.set_attrib( silent, False, bool )
        self._stdout_width = self.set_attrib( stdout_width, 80, int )
        self._simplify = self.set_attrib( simplify, True, bool )
        self._max_angular_momentum = self.set_attrib( max_angular_momentum, 6, int )
        self._max_derivative_order = self.set_attrib( max_derivative_order, 2, int )
        self._build_graphs = self.set_attrib( build_graphs, False, bool )

        # Check implementation restrictions are satisfied
        self.implementation_restriction_check()

    def set_attrib(self,arg,default,allowed_type):
        """
        Returns arg if it is not None, otherwise default, checking the type
        of the returned value against allowed_type.
        """
        if arg is not None:
            assert isinstance( arg, allowed_type ), 'option must be of type '+allowed_type.__name__
            return arg
        else:
            assert isinstance( default, allowed_type )
            return default

    def implementation_restriction_check(self):
        """
        Run through a set of assertions that prevent generator being run with
        option values that are not supported.
        """
        assert 0 <= self.max_angular_momentum() <= 10,\
                "max_angular_momentum must be between 0 and 10"
        assert 0 <= self.max_derivative_order() <= 4,\
                "max_derivative_order must be between 0 and 4"
        assert self.stdout_width() >= 64, "stdout_width must be at least 64"

    def silent(self):
        return self._silent

    def stdout_width(self):
        return self._stdout_width

    def simplify(self):
        return self._simplify

    def max_angular_momentum(self):
        return self._max_angular_momentum

    def max_derivative_order(self):
        return self._max_derivative_order

    def build_graphs(self):
        return self._build_graphs

class recursion_request(classtools.classtools):
    """
    Request for the recursion of one integral class.

    integrand:          operator name, e.g. "1", "T" or "1/|r-r'|"
    angular_momenta:    list of shell orders, one per center
    operator_order:     order of the tensorial shape of the operator
    prefix_orders:      None, or list of geometric derivative orders (one per center)
    bra_size:           number of centers on the bra side (default: 2 for four
                        center integrals, otherwise 1)
    """
    def __init__(self,integrand,angular_momenta,operator_order=0,prefix_orders=None,bra_size=None):
        assert isinstance(integrand,str), 'integrand must be a string'
        assert isinstance_list(angular_momenta,[list,tuple]), 'angular_momenta must be a list'
        if prefix_orders is not None:
            assert isinstance_list(prefix_orders,[list,tuple]), 'prefix_orders must be a list'
        if bra_size is None:
            bra_size = 2 if len( angular_momenta ) == 4 else 1
        self._integral_class = integral_class(angular_momenta,integrand,operator_order,\
                                              prefix_orders,bra_size)

    def __repr__(self):
        return 'recursion_request('+self._integral_class.label()+')'

    def integrand(self):
        return self._integral_class.integrand()

    def integral_class(self):
        return self._integral_class

    def components(self):
        return self._integral_class.components()

def read_requests(filename,opener=open):
    """
    Reads a JSON file containing a list of requests, e.g.
        [ { "integrand" : "1", "angular_momenta" : [ 1, 1 ] },
          { "integrand" : "r", "angular_momenta" : [ 2, 0 ], "operator_order" : 1 } ]
    and returns a list of recursion_request objects.
    """
    data = read_json(filename,opener)
    assert isinstance(data,list), 'request file must contain a list of requests'
    out = []
    for entry in data:
        assert isinstance(entry,dict), 'each request must be a JSON object'
        out.append( recursion_request( entry['integrand'], entry['angular_momenta'],\
                                       entry.get('operator_order',0), entry.get('prefix_orders'),\
                                       entry.get('bra_size') ) )
    return out

class generator(classtools.classtools):
    """
    Expands the recursions for a list of recursion_request objects.

    Users create an instance of generator, passing the requests as
    arguments and optionally a generator_options object. The recursion
    groups (and, if requested, the four-center recursion graphs) are
    built on creation, and written out by generator.out().
    """
    def __init__(self,*args,opt = None):
        """
        *args:  recursion_request objects
        opt:    optional generator_options object (a default instance is
                created if not provided)
        """
        self._requests = []
        self._groups = group_container()
        self._graphs = []
        # Messages output at the end of generator.out(), a list of tuples
        # ( message, program unit issuing the message )
        self._message_list = []

        if opt is None:
            self._generator_options = generator_options()
        else:
            assert isinstance(opt,generator_options), "opt must be of type generator_options"
            self._generator_options = opt
        silent = self.generator_options().silent()
        stdout_width = self.generator_options().stdout_width()

        if not silent:
            print( '-'*stdout_width )
            print( obarec_info.formatted_info_str( stdout_width ) )
            print( '-'*stdout_width )
            print( emitter_info.formatted_info_str( stdout_width ) )
            print( '-'*stdout_width )
        with context_timer("Initializing generator...", stdout_width, silent ):
            self.parse_args(args)
        with context_timer("Expanding recursions...", stdout_width, silent ):
            for request in self._requests:
                self._groups.add( self.create_recursion( request.integrand(), request.components() ) )
        if self.generator_options().build_graphs():
            with context_timer("Building recursion graphs...", stdout_width, silent ):
                self.build_graphs()
        if not silent:
            print( '-'*stdout_width )

    def parse_args(self,args):
        """
        Adds each recursion_request in args, checking it against the limits
        set in generator_options.
        """
        i = 1
        for arg in args:
            if isinstance(arg,recursion_request):
                self.add_request(arg)
            elif isinstance(arg,generator_options):
                raise Exception("generator_options must be passed using the opt keyword")
            else:
                raise Exception('Argument number '+str(i)+': '+str(arg)+' not understood.')
            i += 1

    def add_request(self,request):
        assert isinstance(request,recursion_request), 'request must be a recursion_request'
        iclass = request.integral_class()
        assert max( iclass.angular_momenta() ) <= self.generator_options().max_angular_momentum(),\
                'angular momentum of '+iclass.label()+' exceeds max_angular_momentum'
        if iclass.prefix_orders() is not None:
            assert max( iclass.prefix_orders() ) <= self.generator_options().max_derivative_order(),\
                    'derivative order of '+iclass.label()+' exceeds max_derivative_order'
        for other in self._requests:
            if other.integral_class() == iclass:
                self.add_message('Duplicate request for '+iclass.label()+' ignored.','generator')
                return
        self._requests.append( request )

    def create_recursion(self,integrand,components):
        """Recursion group for a batch of integral components of one family."""
        return create_recursion(integrand,components,self.generator_options().simplify())

    def build_graphs(self):
        """Builds the recursion graph of every four-center electron repulsion request."""
        driver = four_center_electron_repulsion_driver()
        for request in self._requests:
            iclass = request.integral_class()
            if iclass.integrand() != ERI_INTEGRAND or iclass.ncenters() != 4:
                continue
            if iclass.prefix_orders() is not None:
                self.add_message('No recursion graph is built for the derivative integral '+\
                        iclass.label()+'.','generator')
                continue
            self._graphs.append( ( iclass, driver.create_graph( *iclass.angular_momenta() ) ) )
        if len( self._graphs ) == 0:
            self.add_message('build_graphs is set, but no four-center electron repulsion '+\
                    'integrals were requested.','generator')

    def generator_options(self):
        return self._generator_options

    def requests(self):
        return self._requests

    def groups(self):
        """group_container holding one recursion group per request."""
        return self._groups

    def graphs(self):
        """List of ( integral_class, recursion_graph ) tuples."""
        return self._graphs

    def messages(self):
        return self._message_list

    def add_message(self,message_str,info_str):
        """
        Add a message to the list of messages printed to stdout at the end of
        generator.out() (unless generator_options.silent() is True).

        message_str:    informational message for user
        info_str:       context for message (usually program unit providing message)
        """
        assert isinstance( message_str, str ), "message_str must be an instance of str"
        assert isinstance( info_str, str ), "info_str must be an instance of str"
        self._message_list.append( ( message_str, info_str ) )

    def out(self,output_file=sys.stdout):
        """
        Writes every recursion group, followed by every recursion graph, to
        output_file through a recursion_emitter.
        """
        silent = self.generator_options().silent()
        stdout_width = self.generator_options().stdout_width()
        with context_timer("Writing recursions...", stdout_width, silent ):
            emitter = recursion_emitter( printer( output_file = output_file ) )
            for group in self._groups:
                emitter.group_out( group )
            for iclass, graph in self._graphs:
                emitter.printer().out( '// recursion graph for '+iclass.label(), endl='' )
                emitter.graph_out( graph )

        if not silent:
            print( '-'*stdout_width )
            if len( self.messages() ) > 0:
                print( "Messages:" )
                for i, msg_tup in enumerate( self.messages() ):
                    message = str(i) + ' : ' + msg_tup[0]
                    info    = "[ "+msg_tup[1]+" ]"
                    for text in [ message, info ]:
                        for j in range(0, len(text), stdout_width ):
                            print( text[j:j+stdout_width] )
                print( '-'*stdout_width )
