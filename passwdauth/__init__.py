"""passwdauth - authenticate users against passwd / htpasswd style files"""
import logging

__version__ = "0.1"

#library code only logs; applications decide where messages go
logging.getLogger(__name__).addHandler(logging.NullHandler())
