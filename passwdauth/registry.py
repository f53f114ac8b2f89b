"""passwdauth.registry - registry for scheme handlers"""
#=========================================================
#imports
#=========================================================
#core
import re
import logging; log = logging.getLogger(__name__)
#site
#libs
#pkg
#local
__all__ = [
    "register_scheme_handler_path",
    "register_scheme_handler",
    "get_scheme_handler",
    "has_scheme_handler",
    "list_scheme_handlers",
    "is_scheme_handler",
    "BUILTIN_SCHEMES",
]

#==========================================================
#internal registry state
#==========================================================

#: dict mapping scheme id -> handler for all loaded handlers
_handlers = {}

#: dict mapping scheme id -> (module path, attribute) for lazy-loading of handlers
_handler_locations = {
    #NOTE: this is a hardcoded list of the handlers built into passwdauth,
    #applications should call register_scheme_handler_path() to add their own
    "apr1":     ("passwdauth.handlers.md5_crypt",    "apr_md5_crypt"),
    "md5":      ("passwdauth.handlers.md5_crypt",    "md5_crypt"),
    "sha":      ("passwdauth.handlers.ldap_digests", "ldap_sha1"),
    "crypt":    ("passwdauth.handlers.unix_crypt",   "unix_crypt"),
    "plain":    ("passwdauth.handlers.misc",         "plaintext"),
}

#: scheme ids of the builtin handlers, in their canonical order
BUILTIN_SCHEMES = ("apr1", "md5", "sha", "crypt", "plain")

#: master regexp for detecting valid scheme ids
_name_re = re.compile("^[a-z][_a-z0-9]{2,}$")

#: sentinel for get_scheme_handler() default
Undef = object()

#: names which aren't allowed, since they'd be confused with allow-list keywords
_forbidden_names = frozenset(["all", "default", "none"])

#==========================================================
#helpers
#==========================================================
def is_scheme_handler(obj):
    "check if object follows the scheme handler api"
    return all(hasattr(obj, name) for name in ("name", "ident")) and \
           all(callable(getattr(obj, name, None)) for name in ("identify", "verify"))

def _validate_name(name):
    if not name:
        raise ValueError("name is null: %r" % (name,))
    if name.lower() != name:
        raise ValueError("name must be lower-case: %r" % (name,))
    if not _name_re.match(name):
        raise ValueError("invalid characters in name (must be 3+ characters, begin with a-z, and contain only underscore, a-z, 0-9): %r" % (name,))
    if '__' in name:
        raise ValueError("name may not contain double-underscores: %r" % (name,))
    if name in _forbidden_names:
        raise ValueError("that name is not allowed: %r" % (name,))

#==========================================================
#registry frontend functions
#==========================================================
def register_scheme_handler_path(name, path):
    """register location to lazy-load handler when requested.

    custom schemes may be registered via :func:`register_scheme_handler`,
    or they may be registered by this function,
    which will delay actually importing and loading the handler
    until a call to :func:`get_scheme_handler` is made for the specified name.

    :arg name: scheme id, as used in allow-lists.
    :arg path: module import path, optionally followed by ``:attribute``.

    If no attribute is given, the module must contain a handler named
    :samp:`{name}`. For example, this makes ``get_scheme_handler("ssha")``
    return the ``SaltedSha`` class from ``myapp.helpers``::

        >>> from passwdauth.registry import register_scheme_handler_path
        >>> register_scheme_handler_path("ssha", "myapp.helpers:SaltedSha")
    """
    _validate_name(name)
    if ':' in path:
        modname, modattr = path.split(":")
    else:
        modname, modattr = path, name
    _handler_locations[name] = (modname, modattr)

def register_scheme_handler(handler, name=None, force=False):
    """register scheme handler.

    this immediately registers a handler with the internal registry,
    so that it will be returned by :func:`get_scheme_handler` when requested,
    and may be named in the ``allow`` list of a :class:`~passwdauth.passwd.PasswdFile`.

    :arg handler: the scheme handler to register
    :param name: scheme id to register under, defaults to ``handler.name``.
    :param force: force override of existing handler (defaults to False)

    :raises TypeError:
        if the specified object does not appear to be a valid handler.

    :raises ValueError:
        if the scheme id contains invalid characters.

    :raises KeyError:
        if a (different) handler was already registered with
        the same name, and ``force=True`` was not specified.
    """
    #validate handler
    if not is_scheme_handler(handler):
        raise TypeError("object does not appear to be a scheme handler: %r" % (handler,))

    if not name:
        name = handler.name
    _validate_name(name)

    #check for existing handler
    other = _handlers.get(name)
    if other:
        if other is handler:
            return #already registered
        if force:
            log.warning("overriding previous handler registered to name %r: %r", name, other)
        else:
            raise KeyError("a handler has already registered for the name %r: %r (use force=True to override)" % (name, other))

    #register handler in dict
    _handlers[name] = handler
    log.debug("registered scheme handler %r: %r", name, handler)

def get_scheme_handler(name, default=Undef):
    """return handler for specified scheme id.

    if the handler is not already loaded,
    it checks if the location is known, and loads it first.

    :arg name: scheme id of handler to return
    :param default: optional value to return if no handler with specified name is found.

    :raises KeyError: if no handler matching that name is found, and no default specified.
    """
    #check if handler loaded
    handler = _handlers.get(name)
    if handler:
        return handler

    #check if lazy load mapping has been specified for this scheme
    route = _handler_locations.get(name)
    if route:
        modname, modattr = route

        #try to load the module - any import errors indicate runtime config,
        # either missing packages, or bad path provided to register_scheme_handler_path()
        mod = __import__(modname, None, None, ['dummy'], 0)

        #then get real handler & register it
        handler = getattr(mod, modattr)
        register_scheme_handler(handler, name=name)
        return handler

    #fail!
    if default is Undef:
        raise KeyError("no scheme handler found for id: %r" % (name,))
    else:
        return default

def list_scheme_handlers(loaded_only=False):
    """return list of all known scheme ids.

    builtin schemes come first in their canonical order,
    followed by any custom schemes in sorted order.

    :param loaded_only: if ``True``, only returns ids of handlers which have actually been loaded.
    """
    names = set(_handlers)
    if not loaded_only:
        names.update(_handler_locations)
    return [name for name in BUILTIN_SCHEMES if name in names] + \
           sorted(names.difference(BUILTIN_SCHEMES))

def has_scheme_handler(name, loaded_only=False):
    """check if scheme id is known, without loading its handler.

    :param loaded_only: if ``True``, returns False if handler exists but hasn't been loaded
    """
    return (name in _handlers) or (not loaded_only and name in _handler_locations)

def _unload_handler_name(name, locations=True):
    """unloads a handler from the registry.

    .. warning::

        this is an internal function,
        used only by the unittests.

    if loaded handler is found with specified name, it's removed.
    if path to lazy load handler is found, it's removed.

    missing names are a noop.

    :arg name: name of handler to unload
    :param locations: if False, won't purge registered handler locations (default True)
    """
    if name in _handlers:
        del _handlers[name]
    if locations and name in _handler_locations:
        del _handler_locations[name]

#=========================================================
#eof
#=========================================================
