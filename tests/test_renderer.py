import math
import unittest
from dataclasses import replace

import numpy as np
from PIL import Image, ImageChops, ImageDraw

from qrstyle.config import (
    AdvancedOptions,
    BackgroundPattern,
    BorderOptions,
    ClassyLocator,
    ColorStop,
    DotType,
    DropShadow,
    GradientMasking,
    GradientOptions,
    GradientType,
    LayoutOptions,
    LocatorOptions,
    LogoOptions,
    MaskingType,
    MicroTypography,
    ModuleOptions,
    ModuleOutline,
    QuietZoneAccent,
    SquareLocator,
    StyleConfig,
    TypographyPath,
)
from qrstyle.functional_areas import build_drawable_mask, is_finder_pattern
from qrstyle.geometry import compute_geometry
from qrstyle.qr_generator import encode_text
from qrstyle.renderer import render, render_bytes
from test_support import (
    SVG_NS,
    find_all,
    full_matrix,
    make_config,
    module_group,
    parse_svg,
    path_rects,
    single_module_matrix,
    synthetic_matrix,
)


def _circles(root):
    return [
        (float(c.get("cx")), float(c.get("cy")), float(c.get("r")))
        for c in module_group(root).iter(SVG_NS + "circle")
    ]


class TestRenderBasics(unittest.TestCase):
    def test_plain_squares_use_one_rect_and_one_path(self) -> None:
        config = make_config(layout=LayoutOptions(width=200, height=200, margin=0))
        svg = render(synthetic_matrix(), config)
        self.assertEqual(svg.count("<rect"), 1)
        self.assertEqual(svg.count("<path"), 1)
        self.assertIn('<rect width="200" height="200" fill="#ffffff"/>', svg)
        self.assertIn('h9.52v9.52h-9.52z', svg)

    def test_document_header(self) -> None:
        svg = render(synthetic_matrix(), make_config())
        self.assertTrue(svg.startswith(
            '<svg xmlns="http://www.w3.org/2000/svg" width="210" height="210" viewBox="0 0 210 210">'))
        self.assertTrue(svg.endswith("</svg>"))
        root = parse_svg(svg)
        self.assertEqual(root.tag, SVG_NS + "svg")

    def test_defaults_render(self) -> None:
        svg = render(synthetic_matrix())
        root = parse_svg(svg)
        self.assertEqual(root.get("width"), "512")
        # Default dots are circles
        self.assertGreater(len(find_all(root, "circle")), 0)

    def test_deterministic(self) -> None:
        config = make_config(
            dots=DotType.CLASSY_ROUNDED,
            advanced=AdvancedOptions(
                gradient_masking=GradientMasking(MaskingType.RADIAL, "#ff0000", "#00ff00"),
                micro_typography=MicroTypography("hello"),
            ),
        )
        matrix = synthetic_matrix()
        self.assertEqual(render(matrix, config), render(matrix, config))
        self.assertEqual(render(matrix.rows(), config), render(matrix, config))

    def test_render_bytes(self) -> None:
        config = make_config(advanced=AdvancedOptions(micro_typography=MicroTypography("Zürich")))
        data = render_bytes(synthetic_matrix(), config)
        self.assertIsInstance(data, bytes)
        self.assertEqual(data.decode("utf-8"), render(synthetic_matrix(), config))

    def test_transparent_background(self) -> None:
        config = make_config()
        config = replace(config, colors=replace(config.colors, background=None))
        svg = render(synthetic_matrix(), config)
        self.assertNotIn("<rect", svg)

    def test_rejects_non_square_matrix(self) -> None:
        with self.assertRaises(ValueError):
            render([[True, False]], make_config())


class TestDrawingOrder(unittest.TestCase):
    def test_layer_order(self) -> None:
        config = make_config(
            logo=LogoOptions(href="logo.png"),
            locators=LocatorOptions(shape=SquareLocator()),
            border=BorderOptions(thickness=4, color="#ff0000"),
            advanced=AdvancedOptions(
                quiet_zone_accent=QuietZoneAccent(),
                background_pattern=BackgroundPattern(),
                micro_typography=MicroTypography("top", path=TypographyPath.TOP),
            ),
        )
        root = parse_svg(render(synthetic_matrix(), config))
        tags = [child.tag.replace(SVG_NS, "") for child in root]
        self.assertEqual(tags, ["defs", "rect", "rect", "rect", "g", "text"])
        background, border, accent = list(root)[1:4]
        self.assertEqual(background.get("fill"), "url(#bgPattern)")
        self.assertEqual(border.get("stroke"), "#ff0000")
        self.assertEqual(accent.get("stroke"), "#444444")

        clip_group = list(root)[4]
        inner = [child.tag.replace(SVG_NS, "") for child in clip_group]
        self.assertEqual(inner, ["image", "rect", "rect", "rect", "g"])

    def test_typography_outside_clip(self) -> None:
        layout = LayoutOptions(width=200, height=200, margin=0, circle_shape=True)
        config = make_config(layout=layout, advanced=AdvancedOptions(micro_typography=MicroTypography("ring")))
        svg = render(synthetic_matrix(), config)
        self.assertGreater(svg.index("<text"), svg.rindex("</g>"))
        self.assertIn('<g clip-path="url(#clipCircle)">', svg)


class TestBatchedSquares(unittest.TestCase):
    def _rasterize(self, size, rects):
        image = Image.new("L", (size, size), 0)
        draw = ImageDraw.Draw(image)
        for x, y, w, h in rects:
            x0, y0 = int(round(x)), int(round(y))
            draw.rectangle([x0, y0, x0 + int(round(w)) - 1, y0 + int(round(h)) - 1], fill=255)
        return image

    def _assert_equivalent(self, matrix, config) -> None:
        svg = render(matrix, config)
        root = parse_svg(svg)
        paths = list(module_group(root).iter(SVG_NS + "path"))
        self.assertEqual(len(paths), 1)
        runs = path_rects(paths[0].get("d"))

        g = compute_geometry(matrix.size, config.layout)
        drawable = build_drawable_mask(matrix, config, g)
        modules = [
            (*g.module_origin(int(r), int(c)), g.module_size, g.module_size)
            for r, c in zip(*np.nonzero(drawable))
        ]

        # Runs never overlap: total area equals the drawable module area
        self.assertAlmostEqual(sum(w * h for _, _, w, h in runs), len(modules) * 100.0)
        batched = self._rasterize(config.layout.width, runs)
        individual = self._rasterize(config.layout.width, modules)
        self.assertIsNone(ImageChops.difference(batched, individual).getbbox())

    def test_synthetic_matrix(self) -> None:
        self._assert_equivalent(synthetic_matrix(), make_config())

    def test_encoded_matrix_with_exclusions(self) -> None:
        matrix = encode_text("https://example.com/batched?runs=1")
        side = matrix.size * 10
        config = make_config(
            layout=LayoutOptions(width=side, height=side, margin=0),
            locators=LocatorOptions(shape=ClassyLocator()),
            logo=LogoOptions(hole_radius_px=side / 6.0),
        )
        self._assert_equivalent(matrix, config)

    def test_run_count_is_at_most_module_count(self) -> None:
        svg = render(full_matrix(), make_config())
        d = module_group(parse_svg(svg)).find(SVG_NS + "path").get("d")
        self.assertEqual(len(path_rects(d)), 21)
        self.assertIn("M0,0h210v10h-210z", d)


class TestExclusions(unittest.TestCase):
    def test_custom_locator_replaces_finder_modules(self) -> None:
        config = make_config(dots=DotType.CIRCLE, locators=LocatorOptions(shape=SquareLocator()))
        root = parse_svg(render(synthetic_matrix(), config))
        for cx, cy, _ in _circles(root):
            row, col = int((cy - 5) / 10), int((cx - 5) / 10)
            self.assertFalse(is_finder_pattern(row, col, 21), f"module ({row}, {col})")
        locator_rects = [
            (r.get("x"), r.get("y"), r.get("width"))
            for r in find_all(root, "rect") if r.get("width") == "70"
        ]
        self.assertEqual(locator_rects, [("0", "0", "70"), ("140", "0", "70"), ("0", "140", "70")])

    def test_logo_hole(self) -> None:
        config = make_config(dots=DotType.CIRCLE, logo=LogoOptions(hole_radius_px=40.0))
        root = parse_svg(render(full_matrix(), config))
        circles = _circles(root)
        self.assertLess(len(circles), 21 * 21)
        for cx, cy, _ in circles:
            self.assertGreaterEqual(math.hypot(cx - 105, cy - 105), 40.0)
        # A hole without href draws no image
        self.assertEqual(find_all(root, "image"), [])

    def test_circle_shape_containment(self) -> None:
        layout = LayoutOptions(width=200, height=200, margin=0, circle_shape=True)
        config = make_config(layout=layout, dots=DotType.CIRCLE)
        svg = render(full_matrix(), config)
        self.assertIn('<clipPath id="clipCircle"><circle cx="100" cy="100" r="100"/></clipPath>', svg)
        circles = _circles(parse_svg(svg))
        self.assertEqual(len(circles), 21 * 21)
        for cx, cy, r in circles:
            self.assertLessEqual(math.hypot(cx - 100, cy - 100) + r, 100.0 + 0.02)

    def test_circle_shape_keeps_locators_and_logo_inside(self) -> None:
        layout = LayoutOptions(width=200, height=200, margin=0, circle_shape=True)
        config = make_config(
            layout=layout,
            locators=LocatorOptions(shape=SquareLocator()),
            logo=LogoOptions(href="logo.png", size_ratio=0.3),
        )
        root = parse_svg(render(full_matrix(), config))
        clip_group = [g for g in find_all(root, "g") if g.get("clip-path") == "url(#clipCircle)"][0]
        boxes = [
            (float(el.get("x")), float(el.get("y")), float(el.get("width")), float(el.get("height")))
            for el in clip_group
            if el.tag in (SVG_NS + "rect", SVG_NS + "image")
        ]
        self.assertEqual(len(boxes), 4)
        for x, y, w, h in boxes:
            for px, py in ((x, y), (x + w, y), (x, y + h), (x + w, y + h)):
                self.assertLessEqual(math.hypot(px - 100, py - 100), 100.0 + 0.02)


class TestDotTypes(unittest.TestCase):
    def _module_svg(self, **module_options):
        config = StyleConfig(layout=make_config().layout, modules=ModuleOptions(**module_options))
        svg = render(single_module_matrix(10, 10), config)
        return svg, module_group(parse_svg(svg))

    def test_circle(self) -> None:
        svg, group = self._module_svg(type=DotType.CIRCLE)
        self.assertIn('<circle cx="105" cy="105" r="5" fill="#000000"/>', svg)
        self.assertEqual(len(list(group)), 1)

    def test_circle_radius_is_clamped(self) -> None:
        svg, _ = self._module_svg(type=DotType.CIRCLE, radius_factor=0.9)
        self.assertIn('r="5"', svg)

    def test_square(self) -> None:
        svg, _ = self._module_svg(type=DotType.SQUARE)
        self.assertIn('<path d="M100,100h10v10h-10z"/>', svg)

    def test_rounded_square(self) -> None:
        svg, _ = self._module_svg(type=DotType.SQUARE, rounded=True, radius_factor=0.3)
        self.assertIn('<rect x="100" y="100" width="10" height="10" rx="3" ry="3" fill="#000000"/>', svg)
        self.assertNotIn("<path", svg)

    def test_rounded(self) -> None:
        svg, _ = self._module_svg(type=DotType.ROUNDED)
        self.assertIn('rx="2" ry="2"', svg)
        svg, _ = self._module_svg(type=DotType.ROUNDED, rounded=True, radius_factor=0.3)
        self.assertIn('rx="3" ry="3"', svg)

    def test_extra_rounded(self) -> None:
        svg, _ = self._module_svg(type=DotType.EXTRA_ROUNDED)
        self.assertIn('rx="4.50" ry="4.50"', svg)

    def test_classy_ring(self) -> None:
        svg, group = self._module_svg(type=DotType.CLASSY)
        self.assertIn('<circle cx="105" cy="105" r="4" fill="none" stroke="#000000" stroke-width="2"/>', svg)
        self.assertEqual(len(list(group)), 1)

    def test_classy_rounded(self) -> None:
        svg, group = self._module_svg(type=DotType.CLASSY_ROUNDED)
        self.assertEqual(len(list(group)), 2)
        self.assertIn('rx="4.50" ry="4.50" fill="none" stroke="#000000" stroke-width="1.80"', svg)
        self.assertIn('<circle cx="105" cy="105" r="1.89" fill="#000000"/>', svg)

    def test_every_type_draws_every_module(self) -> None:
        matrix = synthetic_matrix()
        expected = {
            DotType.CIRCLE: matrix.dark_count(),
            DotType.CLASSY: matrix.dark_count(),
            DotType.ROUNDED: matrix.dark_count(),
            DotType.EXTRA_ROUNDED: matrix.dark_count(),
            DotType.CLASSY_ROUNDED: 2 * matrix.dark_count(),
        }
        for dot_type, count in expected.items():
            group = module_group(parse_svg(render(matrix, make_config(dots=dot_type))))
            self.assertEqual(len(list(group)), count, dot_type)


class TestFills(unittest.TestCase):
    def test_gradient_fill(self) -> None:
        gradient = GradientOptions(GradientType.LINEAR, (ColorStop(0, "#ff0000"), ColorStop(1, "#0000ff")))
        svg = render(synthetic_matrix(), make_config(gradient=gradient))
        group = module_group(parse_svg(svg))
        self.assertEqual(group.get("fill"), "url(#grad0)")
        self.assertIn('<linearGradient id="grad0"', svg)

    def test_gradient_masking_colors_center_module(self) -> None:
        config = make_config(
            dots=DotType.CIRCLE,
            advanced=AdvancedOptions(
                gradient_masking=GradientMasking(MaskingType.CONCENTRIC, "#ff0000", "#0000ff")),
        )
        svg = render(single_module_matrix(10, 10), config)
        self.assertIn('<circle cx="105" cy="105" r="5" fill="#ff0000"/>', svg)

    def test_masking_varies_across_modules(self) -> None:
        config = make_config(
            dots=DotType.ROUNDED,
            advanced=AdvancedOptions(
                gradient_masking=GradientMasking(MaskingType.LINEAR, "#000000", "#ffffff")),
        )
        group = module_group(parse_svg(render(full_matrix(), config)))
        fills = {rect.get("fill") for rect in group}
        self.assertGreater(len(fills), 10)

    def test_outline_and_shadow_on_group(self) -> None:
        config = make_config(advanced=AdvancedOptions(
            module_outline=ModuleOutline("#222222", 0.5), drop_shadow=DropShadow()))
        svg = render(synthetic_matrix(), config)
        self.assertIn(
            '<g fill="#000000" stroke="#222222" stroke-width="0.50" filter="url(#dropShadow)" '
            'shape-rendering="crispEdges">', svg)
        self.assertIn('<filter id="dropShadow"', svg)


if __name__ == "__main__":
    unittest.main()
