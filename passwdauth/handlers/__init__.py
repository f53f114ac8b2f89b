"""passwdauth.handlers -- holds implementations of the builtin password schemes"""
