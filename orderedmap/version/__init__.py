"""
Version of the orderedmap distribution.

`setup.py` reads `VERSION_STRING` from here, so this module must not import
anything outside the standard library.
"""

#: Offset added to the last component of `VERSION` to mark a beta release.
#: ``(1, 2, 3 + BETA_VERSION_OFFSET)`` is rendered as ``"1.2b3"`` and compares
#: less than every final ``1.2.x`` release.
BETA_VERSION_OFFSET = -1000

#: Version (as a tuple).
VERSION = (1, 0, 0)


def _version_string(version):
    """
    Render a version tuple, using the ``b<n>`` notation for a beta component.
    """
    *release, last = version
    prefix = ".".join(str(component) for component in release)
    if last < 0:
        return "{0}b{1}".format(prefix, last - BETA_VERSION_OFFSET)
    return "{0}.{1}".format(prefix, last)


#: Version (as a string).
VERSION_STRING = _version_string(VERSION)
