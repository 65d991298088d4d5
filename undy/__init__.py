"""
'   __  ___   ______  __  __
'  / / / / | / / __ \ \ \/ /
' / / / /  |/ / / / /  \  /
'/ /_/ / /|  / /_/ /   / /
'\____/_/ |_/_____/   /_/
"""
import logging

# expose every collection function and its aliases
from .extensions import *
from .extensions import __all__ as _extension_names

# expose chaining
from .chain import Chain, chain

# expose supporting types
from .types import InvalidArgument

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = list(_extension_names) + ["Chain", "chain", "InvalidArgument"]
