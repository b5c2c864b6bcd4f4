from .Field import Field
from .Text import Text
from .Textarea import Textarea
from .Number import Number
from .Boolean import Boolean
from .Select import Select
from .Code import Code
from .Hidden import Hidden
from .Heading import Heading
from .JSON import JSON
from .JSONTextareaWidget import JSONTextareaWidget
