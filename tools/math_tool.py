"""Example tool: basic arithmetic on two numbers."""

from tooldeck.tools import ToolDescriptor

_OPERATIONS = {
    "add": lambda a, b: a + b,
    "subtract": lambda a, b: a - b,
    "multiply": lambda a, b: a * b,
    "divide": lambda a, b: a / b,
}


async def run(args):
    operation = args["operation"]
    if operation not in _OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")
    if operation == "divide" and args["b"] == 0:
        raise ValueError("Division by zero")
    result = _OPERATIONS[operation](args["a"], args["b"])
    return f"{args['a']} {operation} {args['b']} = {result}"


tool = ToolDescriptor(
    name="math",
    description="Performs basic arithmetic operations",
    input_schema={
        "type": "object",
        "properties": {
            "operation": {"type": "string", "enum": list(_OPERATIONS)},
            "a": {"type": "number"},
            "b": {"type": "number"},
        },
        "required": ["operation", "a", "b"],
    },
    run=run,
)
