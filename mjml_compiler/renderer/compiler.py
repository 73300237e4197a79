"""Compile MJML documents into email-ready HTML.

The :class:`Compiler` walks the parsed tree in two phases. Head components
run first, in document order, against the root context. The body is then
built depth-first: for every group of siblings the compiler counts the
non-raw ones, and for each sibling resolves its attributes, asks the class
for its child context, builds the grandchildren under that context, and only
then constructs the component itself. Rendering the built ``mj-body`` yields
the body markup, which is dropped into the document skeleton together with
everything the components recorded in :class:`GlobalData`.

Typical usage:

>>> from mjml_compiler.renderer.compiler import Compiler
>>> result = Compiler().render("<mjml><mj-body></mj-body></mjml>")
>>> result.html.startswith("<!doctype html>")
True
"""

from __future__ import annotations

import logging
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .._constants import DEFAULT_DIRECTION, DEFAULT_LANGUAGE
from ..components.base import BodyComponent, HeadComponent, SiblingProps
from ..components.conditional import merge_outlook_conditionals, strip_comments
from ..components.preset import core_registry
from ..config.models import RenderOptions
from ..parser import DEFAULT_ENDING_TAGS, MjmlParser, Node
from .context import RenderContext
from .inliner import post_process
from .models import RenderError, RenderResult

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ..components.registry import Registry

logger = logging.getLogger(__name__)


class Compiler:
    """Turn MJML source or a parsed :class:`Node` into a :class:`RenderResult`."""

    def __init__(
        self,
        registry: Registry | None = None,
        options: RenderOptions | None = None,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Configure the tag registry, default options and skeleton template.

        Parameters
        ----------
        registry : Registry, optional
            Tag lookup used for both head and body. Defaults to every built-in
            tag.
        options : RenderOptions, optional
            Options used when :meth:`render` is not given its own.
        templates_dir : Path, optional
            Directory holding ``skeleton.jinja``. Defaults to
            ``mjml_compiler/templates``.
        """
        self.registry = registry if registry is not None else core_registry()
        self.options = options or RenderOptions()
        self.templates_dir = templates_dir or Path(__file__).parent.parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("skeleton.jinja")

    def parser(self) -> MjmlParser:
        """Return a parser protecting the content of every ending tag known here."""
        return MjmlParser(DEFAULT_ENDING_TAGS | self.registry.ending_tag_names())

    def render(
        self, source: str | Node, options: RenderOptions | None = None
    ) -> RenderResult:
        """Compile ``source`` and return the HTML with any validation errors.

        Parameters
        ----------
        source : str | Node
            MJML text, or a tree already produced by the parser.
        options : RenderOptions, optional
            Overrides the compiler's default options for this call only.

        Returns
        -------
        RenderResult
            The complete HTML document and the errors collected while
            rendering it.

        Raises
        ------
        ParserError
            If ``source`` is text with no ``mjml`` root element.
        RenderError
            If the validation level is ``strict`` and any errors were
            collected.
        """
        resolved = options or self.options
        root = source if isinstance(source, Node) else self.parser().parse(source)

        context = RenderContext.create_root(resolved)
        context.language = root.attributes.get("lang") or DEFAULT_LANGUAGE
        context.direction = root.attributes.get("dir") or DEFAULT_DIRECTION

        self.process_head(root, context)
        body_html = self.process_body(root, context)
        if not resolved.keep_comments:
            body_html = strip_comments(body_html)
        body_html = merge_outlook_conditionals(body_html)

        global_data = context.global_data
        html = post_process(
            self.build_skeleton(body_html, context),
            inline_rules=global_data.inline_style_rules,
            html_attributes=global_data.html_attributes,
            errors=global_data.errors,
        )
        result = RenderResult(html=html, errors=list(global_data.errors))
        if resolved.validation_level == "strict" and result.has_errors:
            raise RenderError(result.errors)
        return result

    # -- head --------------------------------------------------------------

    def process_head(self, root: Node, context: RenderContext) -> None:
        """Let every known head tag record its settings on ``context``."""
        head = root.find_child("mj-head")
        if head is None:
            return
        for node in head.children:
            component_cls = self.registry.get(node.tag_name)
            if component_cls is None or not issubclass(component_cls, HeadComponent):
                logger.debug("Skipping unknown head tag <%s>", node.tag_name)
                continue
            component = component_cls(
                attributes=node.attributes,
                children=node.children,
                content=node.content,
                context=context,
            )
            component.handle(context)

    # -- body --------------------------------------------------------------

    def process_body(self, root: Node, context: RenderContext) -> str:
        """Build and render ``mj-body``, returning an empty string without one."""
        node = root.find_child("mj-body")
        if node is None:
            return ""
        body_cls = self.registry.get(node.tag_name)
        if body_cls is None or not issubclass(body_cls, BodyComponent):
            logger.debug("No body component registered for <%s>", node.tag_name)
            return ""
        body = self.build_component(node, body_cls, context, SiblingProps())
        html = body.render()
        context.background_color = body.get_attribute("background-color")
        return html

    def build_component(
        self,
        node: Node,
        component_cls: type[BodyComponent],
        context: RenderContext,
        props: SiblingProps,
    ) -> BodyComponent:
        """Build ``node`` and its subtree, children first."""
        attributes = component_cls.resolve_attributes(node.attributes, context)
        child_context = context.derive_child(
            component_cls.child_context(attributes, props, context)
        )
        children = self.build_children(node.children, child_context)
        return component_cls(
            attributes=node.attributes,
            children=children,
            content=node.content,
            context=context,
            props=props,
        )

    def build_children(
        self, nodes: cabc.Sequence[Node], context: RenderContext
    ) -> list[BodyComponent]:
        """Build one group of siblings under the context their parent derived."""
        known: list[tuple[Node, type[BodyComponent]]] = []
        for node in nodes:
            component_cls = self.registry.get(node.tag_name)
            if component_cls is None or not issubclass(component_cls, BodyComponent):
                logger.debug("Skipping unknown body tag <%s>", node.tag_name)
                continue
            known.append((node, component_cls))

        non_raw = sum(1 for _, component_cls in known if not component_cls.raw_element)
        return [
            self.build_component(
                node,
                component_cls,
                context,
                SiblingProps(
                    index=index,
                    sibling_count=len(known),
                    non_raw_sibling_count=non_raw,
                ),
            )
            for index, (node, component_cls) in enumerate(known)
        ]

    # -- skeleton ----------------------------------------------------------

    def used_font_urls(self, body_html: str, context: RenderContext) -> list[str]:
        """Return the URLs of fonts the body actually references, in table order."""
        urls: list[str] = []
        for name, url in context.fonts.items():
            pattern = re.compile(rf"font-family:[^;}}]*{re.escape(name)}", re.IGNORECASE)
            used = context.global_data.is_font_used(name) or pattern.search(body_html)
            if used and url not in urls:
                urls.append(url)
        return urls

    def build_skeleton(self, body_html: str, context: RenderContext) -> str:
        """Wrap ``body_html`` in the full document using ``skeleton.jinja``."""
        global_data = context.global_data
        body_style = "word-spacing:normal;"
        if context.background_color:
            body_style += f"background-color:{context.background_color};"
        return self.template.render(
            title=context.title,
            preview=context.preview,
            language=context.language,
            direction=context.direction,
            breakpoint=context.breakpoint,
            font_urls=self.used_font_urls(body_html, context),
            media_queries=list(global_data.media_queries.items()),
            head_styles=list(global_data.head_styles.values()),
            component_head_styles=global_data.component_head_styles,
            body_style=body_style,
            body=body_html,
        )


def render(source: str | Node, options: RenderOptions | None = None) -> RenderResult:
    """Compile ``source`` with the built-in tags."""
    return Compiler().render(source, options)


__all__ = ["Compiler", "render"]
