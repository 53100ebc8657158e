"""Reusable components: any object with render(builder) is a valid child."""

from dataclasses import dataclass

from tagsmith import Attrs, Builder, E, F


@dataclass(frozen=True)
class NavLink:
    href: str
    label: str
    current: bool = False

    def render(self, builder: Builder) -> None:
        attrs = Attrs([("href", self.href)])
        if self.current:
            attrs = attrs.set("aria-current", "page")
        builder.element("a", attrs, self.label)


nav = E("nav", None, [
    NavLink("/", "home"),
    NavLink("/posts", "posts", current=True),
    # Boolean attributes: "false" drops the attribute, anything else renders name=""
    E("input", {"type": "search", "required": "true", "disabled": "false"}),
])

print(F(nav))
