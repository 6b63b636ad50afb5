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
import json

def read_json(filename,opener=open):
    """
    Opens a JSON file, e.g. a list of recursion requests, and returns the
    decoded data.

    filename:   name of json file
    opener:     function used to open the file, with the same signature as
                the built-in open() (replaced by a mock in tests)
    """
    try:
        fd = opener(filename,'r')
    except FileNotFoundError:
        raise FileNotFoundError("Input file "+filename+" not found.")
    try:
        return json.load(fd)
    except ValueError:
        raise ValueError("Improperly formed JSON file "+filename+". See traceback below.")
    finally:
        fd.close()
