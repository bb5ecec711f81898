"""
Semantic error signal.

Every rule of the analyzer raises one of these on the first violation it finds;
the analyzer turns it into a failed result at the program root. Messages keep
the exact wording existing tooling matches against.
"""


class SemanticError(Exception):
    code = "E000"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

    def pretty(self) -> str:
        return f"[{self.code}] {self.message}"


class UndefinedIdentifierError(SemanticError):
    code = "E001"

    def __init__(self, name: str):
        super().__init__(f"Invalid use of undefined Identifier {name}")
        self.name = name


class MultipleDeclarationError(SemanticError):
    code = "E002"

    def __init__(self, name: str):
        super().__init__(f"Identifier {name} has multiple declarations")
        self.name = name


class UnknownDeclaredTypeError(SemanticError):
    code = "E003"

    def __init__(self, name: str, type_name: str):
        super().__init__(
            f"Identifier {name} has been declared with the type {type_name} that does not exist"
        )
        self.name = name
        self.type_name = type_name


class InvalidConditionTypeError(SemanticError):
    code = "E004"

    def __init__(self):
        super().__init__("Invalid type in condition")


class InvalidExpressionTypeError(SemanticError):
    code = "E005"

    def __init__(self):
        super().__init__("Invalid type in expression")


class InvalidAssignmentTypeError(SemanticError):
    code = "E006"

    def __init__(self, name: str):
        super().__init__(f"Invalid type in assignation of Identifier {name}")
        self.name = name


class InvalidSwitchTypeError(SemanticError):
    code = "E007"

    def __init__(self, name: str):
        super().__init__(f"Invalid type in switch of Identifier {name}")
        self.name = name


class InvalidCaseTypeError(SemanticError):
    code = "E008"

    def __init__(self, prefix: str, text: str):
        # prefix is "integer" or "Identifier"
        super().__init__(f"Invalid type in case of {prefix} {text}")
        self.prefix = prefix
        self.text = text
