from typing import Any, Callable, Dict

from hello_rpc.models import GreetingParams, GreetingResult

Handler = Callable[[Dict[str, Any]], Any]

# method name -> handler, filled at import time
METHODS: Dict[str, Handler] = {}

def method(name: str):
    def register(func: Handler) -> Handler:
        METHODS[name] = func
        return func
    return register

DEFAULT_SUBJECT = "World"

# Unicode White_Space; str.strip() would also drop U+001C..U+001F
WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

@method("greeting")
def greeting(params: Dict[str, Any]) -> GreetingResult:
    """
    params: { name }
    Surrounding whitespace is trimmed; an empty name greets the world.
    Raises pydantic.ValidationError if name is missing or not a string.
    """
    name = GreetingParams.model_validate(params).name.strip(WHITE_SPACE)
    if not name:
        name = DEFAULT_SUBJECT
    return GreetingResult(greeting=f"Hello, {name}!")
