"""Example tool: echoes back the input message."""


def run(args):
    return f"Echo: {args['message']}"


tool = {
    "name": "echo",
    "description": "Echoes back the input message",
    "input_schema": {
        "type": "object",
        "properties": {
            "message": {"type": "string", "description": "The message to echo back"},
        },
        "required": ["message"],
    },
    "run": run,
}
