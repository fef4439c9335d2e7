"""Fixed names shared with downstream OSCAL tooling.

Consumers of the generated component definitions (compliance-trestle and
the tools built on it) look these properties up by exact name and namespace.
"""

OSCAL_VERSION = "1.1.3"

TRESTLE_NAMESPACE = "https://oscal-compass.github.io/compliance-trestle/schemas/oscal"

# Property names
FRAMEWORK_PROP = "Framework_Short_Name"
RULE_ID_PROP = "Rule_Id"
RULE_DESCRIPTION_PROP = "Rule_Description"
PARAMETER_ID_PROP = "Parameter_Id"
PARAMETER_DESCRIPTION_PROP = "Parameter_Description"
PARAMETER_VALUE_ALTERNATIVES_PROP = "Parameter_Value_Alternatives"
CHECK_ID_PROP = "Check_Id"
CHECK_DESCRIPTION_PROP = "Check_Description"
RESOURCE_ID_PROP = "id"

# Remarks value grouping the properties of one rule
RULE_SET_REMARKS = "rule_set_{index:02d}"

# Component types
VALIDATION_COMPONENT_TYPE = "validation"

# Part names
STATEMENT_PART = "statement"
ITEM_PART = "item"
GUIDANCE_PART = "guidance"
OBJECTIVE_PART = "assessment-objective"

# Link relations
RELATED_REL = "related"
REFERENCE_REL = "reference"

AUTHOR_ROLE_ID = "author"
