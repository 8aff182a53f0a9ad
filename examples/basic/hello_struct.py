"""Build and render a struct in a few lines — zero config, zero deps."""

from rustgen import Scope, to_string

scope = Scope()
scope.new_struct("Hello").derive("Debug").field("world", "String")
print(to_string(scope))
