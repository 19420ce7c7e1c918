
class L1Error(Exception):
    """ Base class for all L1 evaluation failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    # Errors are compared by kind and message so that identical evaluations
    # produce equal failures
    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class L1InvalidVariable(L1Error):
    """ Raised when a binding is created with an invalid variable name"""

    def __init__(self, name):
        super().__init__(f"Cannot bind {name!r} as a variable")
        self.name = name


class L1UnboundVariable(L1Error):
    """ A variable is referenced with no matching binding"""

    def __init__(self, name: str):
        super().__init__(f"var not found {name}")
        self.name = name


class L1NotAProcedure(L1Error):
    """ The operator position of an application is not a primitive operator"""

    def __init__(self, description: str):
        super().__init__(f"Bad procedure {description}")
        self.description = description


class L1UnknownOperator(L1Error):
    """ A primitive operator tag outside the recognised set"""

    def __init__(self, op: str):
        super().__init__(f"Bad primitive op {op}")
        self.op = op


class L1TypeMismatch(L1Error):
    """ Arguments of the wrong kind or count for an operator"""

    def __init__(self, op: str, args: list):
        super().__init__(f"Type mismatch: {op} cannot be applied to {args!r}")
        self.op = op
        self.operands = list(args)


class L1DivisionByZero(L1Error):
    """ / was given a zero divisor"""

    def __init__(self):
        super().__init__("Division by zero")


class L1ArithmeticOverflow(L1Error):
    """ An arithmetic result does not fit in a float"""

    def __init__(self, op: str, args: list):
        super().__init__(f"Arithmetic overflow: {op} applied to numbers too large for a float")
        self.op = op
        self.operands = list(args)


class L1EmptyProgram(L1Error):
    """ A sequence with no expressions left to evaluate"""

    def __init__(self):
        super().__init__("Empty program")


class L1MalformedExpression(L1Error):
    """ A node outside the known expression variants reached the evaluator"""

    def __init__(self, exp):
        super().__init__(f"Bad L1 AST {exp!r}")
        self.exp = exp
