import warnings

from bvartools.tools.sm_exceptions import CacheWriteWarning

__all__ = ['cache_readonly', 'copy_doc']


def copy_doc(docstring):
    """
    Add a docstring to a function, so that

        def foo(x):
            [...]
        foo.__doc__ = bar

    can be replaced with:

        @copy_doc(bar)
        def foo(x):
            [...]

    """
    def decoration(func):
        func.__doc__ = docstring
        return func
    return decoration


class CachedAttribute(object):
    def __init__(self, func, cachename=None):
        self.fget = func
        self.name = func.__name__
        self.cachename = cachename or '_cache'
        self.__doc__ = func.__doc__

    def __get__(self, obj, type=None):
        if obj is None:
            # accessing the attribute on the class, not an instance
            return self.fget

        # Get the cache or set a default one if needed
        _cachename = self.cachename
        _cache = getattr(obj, _cachename, None)
        if _cache is None:
            setattr(obj, _cachename, {})
            _cache = getattr(obj, _cachename)

        # Get the name of the attribute to set and cache
        name = self.name
        _cachedval = _cache.get(name, None)
        if _cachedval is None:
            # Call the "fget" function
            _cachedval = self.fget(obj)
            # Set the attribute in obj
            _cache[name] = _cachedval

        return _cachedval

    def __set__(self, obj, value):
        warnings.warn("The attribute '%s' cannot be overwritten" % self.name,
                      CacheWriteWarning)


class _cache_readonly(object):
    """
    Decorator for CachedAttribute
    """
    def __init__(self, cachename=None):
        self.func = None
        self.cachename = cachename

    def __call__(self, func):
        return CachedAttribute(func,
                               cachename=self.cachename)


cache_readonly = _cache_readonly()
