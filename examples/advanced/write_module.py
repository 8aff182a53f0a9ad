"""Generate a module with a trait and an impl, streamed into a file."""

import sys

from rustgen import Scope, render

scope = Scope()
module = scope.new_module("shapes").vis("pub")
module.import_("std::fmt", "Debug")

trait = module.new_trait("Area").vis("pub").parent("Debug")
trait.new_fn("area").arg_ref_self().ret("f64")

module.new_struct("Square").derive("Debug").vis("pub").field("side", "f64")

impl = module.new_impl("Square").impl_trait("Area")
impl.new_fn("area").arg_ref_self().ret("f64").line("self.side * self.side")

render(scope, sys.stdout)
print()
