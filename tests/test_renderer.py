"""Tests for stub class rendering."""
from __future__ import annotations

from sobject_defs.core.models import FieldDescriptor, ObjectDescription
from sobject_defs.core.renderer import render_field, render_stub

ACCOUNT = ObjectDescription(
    name="Account",
    label="Account",
    fields=(
        FieldDescriptor("Id", "id", "Account ID"),
        FieldDescriptor("Name", "string", "Account Name"),
        FieldDescriptor("AnnualRevenue", "currency", "Annual Revenue"),
        FieldDescriptor("ParentId", "reference", "Parent Account ID", ("Account",)),
    ),
)

EXPECTED_ACCOUNT = """\
// This file is generated as an Apex representation of the
//     Account
// standard object in your org.
// This file is used for language services by the Apex Language Server.

global class Account {
    // Account ID
    global String Id;
    // Account Name
    global String Name;
    // Annual Revenue
    global Double AnnualRevenue;
    // Parent Account ID
    global Account ParentId;

    global Account() { }
}"""


class TestRenderField:
    def test_label_comment_precedes_declaration(self):
        lines = render_field(FieldDescriptor("Email", "email", "Email Address"))
        assert lines == ["    // Email Address", "    global String Email;"]

    def test_missing_label_omits_comment(self):
        assert render_field(FieldDescriptor("Score__c", "int")) == ["    global Integer Score__c;"]

    def test_empty_label_omits_comment(self):
        assert render_field(FieldDescriptor("Score__c", "int", "")) == ["    global Integer Score__c;"]


class TestRenderStub:
    def test_full_output(self):
        assert render_stub(ACCOUNT) == EXPECTED_ACCOUNT

    def test_no_trailing_newline(self):
        assert not render_stub(ACCOUNT).endswith("\n")

    def test_field_order_preserved(self):
        names = ["Zeta__c", "Alpha__c", "Mid__c"]
        desc = ObjectDescription("Thing__c", "Thing", tuple(FieldDescriptor(n, "string") for n in names))
        body = render_stub(desc)
        positions = [body.index(f"global String {n};") for n in names]
        assert positions == sorted(positions)

    def test_object_without_fields(self):
        body = render_stub(ObjectDescription("Empty__c", "Empty"))
        assert body.endswith("global class Empty__c {\n\n    global Empty__c() { }\n}")

    def test_unknown_type_renders_object(self):
        desc = ObjectDescription("Odd__c", "Odd", (FieldDescriptor("Blob__c", "futuretype"),))
        assert "    global Object Blob__c;" in render_stub(desc)

    def test_deterministic(self):
        assert render_stub(ACCOUNT) == render_stub(ACCOUNT)
