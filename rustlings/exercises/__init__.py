"""Working versions of the exercises, written as Python functions and types."""