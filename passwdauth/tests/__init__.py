"""passwdauth tests"""
