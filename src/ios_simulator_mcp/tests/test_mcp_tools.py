#!/usr/bin/env python3
"""
Unit tests for mcp/mcp_tools.py

These drive the FastMCP server in-process: tools are invoked through
``call_tool`` and resources through ``read_resource``.
"""

import os
import shutil
import tempfile
import unittest

from ios_simulator_mcp.core.registry import ScreenshotRegistry
from ios_simulator_mcp.mcp.mcp_tools import create_mcp_server
from ios_simulator_mcp.tests.fakes import PNG_BYTES, FakeSimctlRunner


def content_blocks(result):
    """Normalize call_tool output across mcp releases."""
    if isinstance(result, tuple):
        return list(result[0])
    return list(result)


class TestMcpServer(unittest.IsolatedAsyncioTestCase):
    """Test cases for the FastMCP server wiring"""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.screenshot_dir = os.path.join(self.temp_dir, "resources", "shots")
        self.registry = ScreenshotRegistry()
        self.runner = FakeSimctlRunner()
        self.mcp = create_mcp_server(
            "Test iOS Simulator",
            registry=self.registry,
            runner=self.runner,
            screenshot_dir=self.screenshot_dir,
        )

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    async def read(self, uri):
        contents = list(await self.mcp.read_resource(uri))
        self.assertEqual(len(contents), 1)
        return contents[0]

    def test_screenshot_dir_created_at_startup(self):
        self.assertTrue(os.path.isdir(self.screenshot_dir))

    async def test_tools_registered(self):
        tools = {tool.name: tool for tool in await self.mcp.list_tools()}
        self.assertEqual(
            set(tools),
            {"get_booted_sim_id", "get_all_simulators", "take_screenshot", "boot_simulator", "delete_screenshot"},
        )
        take = tools["take_screenshot"].inputSchema
        self.assertEqual(set(take["properties"]), {"deviceId", "name", "outputPath"})
        self.assertEqual(take.get("required"), ["deviceId"])
        self.assertEqual(tools["delete_screenshot"].inputSchema.get("required"), ["name"])

    async def test_resources_registered(self):
        resources = [str(resource.uri) for resource in await self.mcp.list_resources()]
        templates = [template.uriTemplate for template in await self.mcp.list_resource_templates()]
        self.assertIn("screenshot://list", resources)
        self.assertIn("screenshot://{name}", templates)

    async def test_list_resource_tracks_registry(self):
        self.assertEqual((await self.read("screenshot://list")).content, "")

        for name in ("A", "B", "C"):
            self.registry.register(name, PNG_BYTES)
        listing = (await self.read("screenshot://list")).content
        self.assertEqual(sorted(listing.split("\n")), ["A", "B", "C"])

    async def test_screenshot_resource_resolves_current_bytes(self):
        self.registry.register("home", b"\x89PNG one")
        self.registry.register("home", b"\x89PNG two")

        resource = await self.read("screenshot://home")
        self.assertEqual(resource.content, b"\x89PNG two")
        self.assertEqual(resource.mime_type, "image/png")

    async def test_unknown_screenshot_resource_fails(self):
        with self.assertRaises(Exception):
            await self.mcp.read_resource("screenshot://missing")

    async def test_capture_then_read_then_delete(self):
        result = await self.mcp.call_tool("take_screenshot", {"deviceId": "ABCD-1234-EF", "name": "home"})
        blocks = content_blocks(result)
        self.assertIn("screenshot://home", blocks[0].text)
        self.assertEqual(blocks[1].type, "image")

        resource = await self.read("screenshot://home")
        self.assertEqual(resource.content, PNG_BYTES)
        self.assertEqual((await self.read("screenshot://list")).content, "home")

        result = await self.mcp.call_tool("delete_screenshot", {"name": "home"})
        self.assertEqual(content_blocks(result)[0].text, "Successfully deleted screenshot: home")
        self.assertEqual((await self.read("screenshot://list")).content, "")
        with self.assertRaises(Exception):
            await self.mcp.read_resource("screenshot://home")

    async def test_spaced_and_slashed_names_read_back_through_advertised_uri(self):
        for name in ("home screen", "flows/login"):
            result = await self.mcp.call_tool(
                "take_screenshot",
                {"deviceId": "ABCD-1234-EF", "name": name, "outputPath": os.path.join(self.temp_dir, "shot.png")},
            )
            text = content_blocks(result)[0].text
            uri = text.split("Accessible as resource: ", 1)[1]

            resource = await self.read(uri)
            self.assertEqual(resource.content, PNG_BYTES)

        self.assertEqual(uri, "screenshot://flows%2Flogin")
        self.assertEqual(sorted(self.registry.list_names()), ["flows/login", "home screen"])

    async def test_failed_capture_returns_text(self):
        result = await self.mcp.call_tool("take_screenshot", {"deviceId": "bad-device"})
        blocks = content_blocks(result)
        self.assertEqual(len(blocks), 1)
        self.assertTrue(blocks[0].text.startswith("Error taking screenshot: "))
        self.assertEqual(self.registry.list_names(), [])

    async def test_get_booted_sim_id_tool(self):
        result = await self.mcp.call_tool("get_booted_sim_id", {})
        text = content_blocks(result)[0].text
        self.assertIn("iPhone 15", text)
        self.assertIn("ABCD-1234-EF", text)


if __name__ == "__main__":
    unittest.main()
