from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant identifier for items supplied without one"""
    result = cuid_generator()
    assert isinstance(result, str)
    return result
