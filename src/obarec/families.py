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
Registry of the operator families known to Obarec.

Each operator_family ties an integrand (operator name, kind of tensorial
shape and number of centers) to the recursion driver which reduces it,
together with the properties code emitters need to know about, e.g.
whether the Boys function has to be evaluated for the auxiliary
integrals of the family.

The registry replaces dispatch on the operator name: callers look up the
family of an integral component with find_family() and use its driver.
"""
from obarec import classtools
from obarec.integral import integral_component
from obarec.errors import UnknownFamilyError
from obarec.drivers import overlap_driver, kinetic_energy_driver, nuclear_potential_driver,\
        nuclear_potential_geom_driver, multipole_driver, linear_momentum_driver,\
        electric_field_driver, electron_repulsion_driver, three_center_electron_repulsion_driver,\
        four_center_electron_repulsion_driver, local_ecp_driver, projected_ecp_driver,\
        three_center_overlap_driver, three_center_overlap_gradient_driver, three_center_r2_driver,\
        three_center_rr2_driver, ERI_INTEGRAND, GAUSSIAN_INTEGRAND

class operator_family(classtools.classtools):
    """
    One operator family.

    name:           descriptive name of the family
    integrand:      name of the operator
    driver_class:   recursion_driver subclass reducing the family
    shaped:         True if the operator has a nonzero tensorial shape,
                    False if the shape is zero
    ncenters:       number of centers of the integrals
    boys_function:  True if the auxiliary integrals require the Boys function
    distances:      True if the operator itself brings in distances, so that
                    even integrals of s functions need them
    max_operator_order:
                    None, or the highest order of the operator shape the
                    recursion supports
    """
    def __init__(self,name,integrand,driver_class,shaped=False,ncenters=2,\
                 boys_function=False,distances=False,max_operator_order=None):
        assert isinstance(name,str), 'name must be a string'
        assert isinstance(integrand,str), 'integrand must be a string'
        assert isinstance(shaped,bool), 'shaped must be True or False'
        assert isinstance(ncenters,int) and 1 <= ncenters <= 4, 'ncenters must be 1-4'
        self._name = name
        self._integrand = integrand
        self._driver_class = driver_class
        self._driver = None
        self._shaped = shaped
        self._ncenters = ncenters
        self._boys_function = boys_function
        self._distances = distances
        self._max_operator_order = max_operator_order

    def __repr__(self):
        return 'operator_family('+self._name+')'

    def name(self):
        return self._name

    def integrand(self):
        return self._integrand

    def shaped(self):
        return self._shaped

    def ncenters(self):
        return self._ncenters

    def matches(self,integral):
        """True if integral (an integral_component, derivative prefixes
        ignored) belongs to this family."""
        assert isinstance(integral,integral_component), 'integral must be an integral_component'
        integrand = integral.integrand()
        if integrand.name() != self._integrand:
            return False
        if ( integrand.shape().order() > 0 ) != self._shaped:
            return False
        if self._max_operator_order is not None and integrand.shape().order() > self._max_operator_order:
            return False
        return integral.ncenters() == self._ncenters

    def driver(self):
        """Recursion driver of the family, created on first use."""
        if self._driver is None:
            self._driver = self._driver_class()
        return self._driver

    def needs_boys_function(self):
        return self._boys_function

    def needs_distances(self):
        return self._distances

_families = []

def register_family(family):
    """Adds family to the registry. Families registered later take
    precedence over earlier ones matching the same integrals."""
    assert isinstance(family,operator_family), 'family must be an operator_family'
    _families.insert(0,family)

def registered_families():
    return list( _families )

def find_family(integral):
    """Returns the operator_family of integral, raising UnknownFamilyError
    if no registered family matches."""
    for family in _families:
        if family.matches(integral):
            return family
    raise UnknownFamilyError('No recursion is known for integrand '+\
            integral.integrand().label()+' over '+str(integral.ncenters())+' centers',integral)

def is_known_integrand(integral):
    for family in _families:
        if family.matches(integral):
            return True
    return False

def needs_boys_function(integral):
    return find_family(integral).needs_boys_function()

def needs_distances(integral):
    """
    True if the recursion of integral refers to distances between centers,
    which is the case unless every center carries an s function, there are
    no derivative prefixes and the operator brings in no distances of its own.
    """
    if find_family(integral).needs_distances():
        return True
    if not integral.prefixes().empty():
        return True
    for center in integral.centers():
        if center.order() > 0:
            return True
    return False

for family in [ operator_family('overlap','1',overlap_driver),
                operator_family('kinetic energy','T',kinetic_energy_driver),
                operator_family('nuclear potential','A',nuclear_potential_driver,boys_function=True),
                operator_family('nuclear potential gradient','AG',nuclear_potential_geom_driver,\
                                shaped=True,boys_function=True),
                operator_family('multipole','r',multipole_driver,shaped=True),
                operator_family('linear momentum','p',linear_momentum_driver,shaped=True,distances=True),
                operator_family('electric field','A1',electric_field_driver,\
                                shaped=True,boys_function=True),
                operator_family('electron repulsion',ERI_INTEGRAND,electron_repulsion_driver,\
                                boys_function=True),
                operator_family('three center electron repulsion',ERI_INTEGRAND,\
                                three_center_electron_repulsion_driver,ncenters=3,boys_function=True),
                operator_family('four center electron repulsion',ERI_INTEGRAND,\
                                four_center_electron_repulsion_driver,ncenters=4,boys_function=True),
                operator_family('local ECP','U_L',local_ecp_driver),
                operator_family('projected ECP','U_l',projected_ecp_driver),
                operator_family('three center overlap',GAUSSIAN_INTEGRAND,three_center_overlap_driver),
                operator_family('three center overlap, shell on the Gaussian',GAUSSIAN_INTEGRAND,\
                                three_center_overlap_driver,ncenters=3),
                operator_family('three center overlap gradient','GX(r)',three_center_overlap_gradient_driver,\
                                shaped=True,distances=True,max_operator_order=1),
                operator_family('three center r2 overlap','GR2(r)',three_center_r2_driver,distances=True),
                operator_family('three center r.r2 overlap','GR.R2(r)',three_center_rr2_driver,\
                                shaped=True,distances=True,max_operator_order=1) ]:
    register_family(family)
