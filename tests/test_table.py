import io
import unittest

from dockps.models import DisplayRow
from dockps.outputs.table import HEADER_ROW, build_container_table, render_container_table


def make_row(**overrides) -> DisplayRow:
    values = {
        "id": "8dfafdbc3a40",
        "image": "ubuntu",
        "name": "app1",
        "command": "sleep infinity",
        "created": "3 minutes ago",
        "status": "Up 3 minutes",
        "ports": "80->8080/tcp",
    }
    values.update(overrides)
    return DisplayRow(**values)


def render(rows) -> str:
    output = io.StringIO()
    render_container_table(rows, file=output)
    return output.getvalue()


class TestContainerTable(unittest.TestCase):

    def test_header_order(self):
        self.assertEqual(HEADER_ROW, ["id", "image", "name", "command", "created", "status", "ports"])
        table = build_container_table([])
        self.assertEqual([column.header for column in table.columns], HEADER_ROW)

    def test_rows_in_order(self):
        table = build_container_table([make_row(name="first"), make_row(name="second")])
        self.assertEqual(table.row_count, 2)

        lines = render([make_row(name="first"), make_row(name="second")]).splitlines()
        first = next(i for i, line in enumerate(lines) if "first" in line)
        second = next(i for i, line in enumerate(lines) if "second" in line)
        self.assertLess(first, second)

    def test_rounded_border(self):
        lines = render([make_row()]).splitlines()
        self.assertTrue(lines[0].startswith("╭"))
        self.assertTrue(lines[0].endswith("╮"))
        self.assertTrue(lines[-1].startswith("╰"))
        for header in HEADER_ROW:
            self.assertIn(header, lines[1])
        self.assertIn("80->8080/tcp", "\n".join(lines))

    def test_trailing_newline(self):
        self.assertTrue(render([make_row()]).endswith("\n"))

    def test_empty(self):
        output = render([])
        for header in HEADER_ROW:
            self.assertIn(header, output)
        self.assertNotIn("app1", output)
        self.assertTrue(output.splitlines()[-1].startswith("╰"))

    def test_long_values_not_wrapped(self):
        command = "python -m http.server " + "x" * 200
        output = render([make_row(command=command)])
        self.assertTrue(any(command in line for line in output.splitlines()))

    def test_markup_printed_literally(self):
        output = render([make_row(name="[bold]web[/bold]")])
        self.assertIn("[bold]web[/bold]", output)
        self.assertNotIn("\x1b[", output)


if __name__ == "__main__":
    unittest.main()
