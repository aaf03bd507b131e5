"""Walk through the Proxy API on a dict and on a plain object.

Run from the repository root:

    python scripts/proxy_example.py
"""
import logging

from proxy_lib import Proxy
from proxy_lib.logging_config import configure_logging

logger = configure_logging()
logger.setLevel(logging.INFO)


class Example:
    def __init__(self) -> None:
        self.property = 'test'

    def method(self) -> str:
        return 'foo'


def main() -> None:
    data = {'foo': 'bar'}
    proxy = Proxy(data)
    print(proxy.has('foo'))             # True
    print(proxy.is_initialised('foo'))  # True
    print(proxy.get('foo'))             # bar
    proxy.set('foo', 'baz')
    print(data['foo'])                  # baz

    obj = Example()
    proxy = Proxy(obj)
    print(proxy.get_keys())                  # ['property', 'method()']
    print(proxy.has('property'))             # True
    print(proxy.get('property'))             # test
    print(proxy.has('method()'))             # True
    print(proxy.is_initialised('method()'))  # True
    print(proxy.get('method()'))             # foo
    proxy.set('property', 'baz')
    print(obj.property)                      # baz


if __name__ == '__main__':
    main()
