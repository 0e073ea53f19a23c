"""Basic usage examples for typeh."""

import typeh
from typeh import define, refined_type, typed, validate, validate_map


# Example 1: Enforcing constructors
def make_user(name, age=None):
    """Build a user record from checked fields."""
    return {"name": typeh.string(name), "age": typeh._int(age)}


# Example 2: Validating several arguments at once
def connect(host, port, secure):
    validate_map({"string": host, "int": port, "bool": secure})
    return f"{'https' if secure else 'http'}://{host}:{port}"


# Example 3: Ad-hoc expressions
identifier = define("int|string")


# Example 4: Decorated function
@typed(items="array", scale="int|float", returns="array")
def scale_all(items, scale=1):
    """Multiply every item by scale."""
    return [item * scale for item in items]


if __name__ == "__main__":
    print("typeh Basic Usage Examples")
    print("=" * 50)

    print(f"refined_type(12)   = {refined_type(12)}")
    print(f"refined_type(12.0) = {refined_type(12.0)}")
    print(f"refined_type(12.5) = {refined_type(12.5)}")

    print(f"make_user('ada')   = {make_user('ada')}")
    print(f"connect(...)       = {connect('example.org', 443, True)}")
    print(f"identifier(42)     = {identifier(42)}")
    print(f"scale_all([1, 2])  = {scale_all([1, 2], 0.5)}")

    print(f"is_numeric('42')   = {typeh.is_numeric('42')}")
    print(f"is_countable({{}})   = {typeh.is_countable({})}")

    try:
        validate("bool", "yes")
    except typeh.TypeValidationError as e:
        print(f"validate('bool', 'yes') -> {e}")
