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
Provides the prog_unit_info class, whose instances describe a program
unit (name, version, author, license), and the instance describing
Obarec itself.
"""
from obarec import classtools

class prog_unit_info(classtools.classtools):
    """
    Information relating to a program unit, e.g. Obarec as a whole, or one
    of its emitters.
    """
    def __init__(self, unit_name_str, unit_desc_str, version_str, author_str, license_str, \
                 extra_str_list=None):
        """
        unit_name_str:   name of the program unit, e.g. "Obarec".
        unit_desc_str:   descriptive phrase for program unit.
        version_str:     version of the unit.
        author_str:      author or authors of the unit.
        license_str:     license of the unit.
        extra_str_list:  optional list of additional lines
        """
        self._unit_name_str = unit_name_str
        self._unit_desc_str = unit_desc_str
        self._version_str   = version_str
        self._author_str    = author_str
        self._license_str   = license_str
        self._extra_str_list= extra_str_list

    def unit_name_str(self):
        return self._unit_name_str

    def unit_desc_str(self):
        return self._unit_desc_str

    def version_str(self):
        return self._version_str

    def author_str(self):
        return self._author_str

    def license_str(self):
        return self._license_str

    def extra_str_list(self):
        return self._extra_str_list

    def lines(self):
        """List of the information lines, before formatting."""
        out = [ self.unit_name_str() + ": " + self.unit_desc_str(),
                "Developed by " + self.author_str(),
                "Version: " + self.version_str(),
                "License: " + self.license_str() ]
        if self.extra_str_list() is not None:
            out.extend( self.extra_str_list() )
        return out

    def formatted_info_str(self,stdout_width):
        """
        Returns the information lines centered within stdout_width.

        An AssertionError is raised if any line does not fit.
        """
        out = []
        for iline, line in enumerate( self.lines() ):
            assert len( line ) < stdout_width, \
                    "line "+str(iline+1)+" must be shorter than stdout_width ("+str(stdout_width)+")."
            out.append( line.center(stdout_width) )
        return '\n'.join( out )

obarec_info = prog_unit_info(\
                    unit_name_str = "Obarec",\
                    unit_desc_str = "Molecular integral recursion compiler",\
                    version_str   = "1.0",\
                    author_str    = "James C. Womack",\
                    license_str   = "GNU General Public License version 3", \
                    extra_str_list= [  "",
                            "This program comes with ABSOLUTELY NO WARRANTY.",
                            "This is free software, and you are welcome to redistribute it",
                            "under certain conditions. See the LICENSE file for details."]
                )
