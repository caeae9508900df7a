"""Field bindings for every supported ILCD data set type."""

from __future__ import annotations

from typing import Any, Mapping

from tiangong_lca_ilcd.datasets import (
    Class,
    Classification,
    Contact,
    ContactInfo,
    DataEntry,
    DataSetType,
    Exchange,
    Factor,
    Flow,
    FlowInfo,
    FlowName,
    FlowProperty,
    FlowPropertyInfo,
    FlowPropertyRef,
    LCIAResult,
    Method,
    MethodInfo,
    Process,
    ProcessInfo,
    ProcessName,
    ProcessTime,
    Publication,
    QuantitativeReference,
    Ref,
    Source,
    SourceInfo,
    Unit,
    UnitGroup,
    UnitGroupInfo,
)

from .bindings import Binding, integer, integers, lang, many, number, one, text, texts

# Shared sub-documents

REF = Binding(
    Ref,
    (
        text("uuid", "@refObjectId"),
        text("type", "@type"),
        text("uri", "@uri"),
        text("version", "@version"),
        lang("name", "shortDescription"),
    ),
)

CLASS = Binding(
    Class,
    (
        integer("level", "@level"),
        text("class_id", "@classId"),
        text("name", "."),
    ),
)

# Elementary flow categories carry their identifier in catId rather than classId.
CATEGORY = Binding(
    Class,
    (
        integer("level", "@level"),
        text("class_id", "@catId"),
        text("name", "."),
    ),
)

CLASSIFICATION = Binding(
    Classification,
    (
        text("name", "@name"),
        many("classes", "class", CLASS),
    ),
)

DATA_ENTRY = Binding(
    DataEntry,
    (
        text("time_stamp", "timeStamp"),
        many("data_formats", "referenceToDataSetFormat", REF),
    ),
)

PUBLICATION = Binding(
    Publication,
    (
        text("version", "dataSetVersion"),
        text("uri", "permanentDataSetURI"),
        one("owner", "referenceToOwnershipOfDataSet", REF),
    ),
)

_CLASSIFICATIONS = "classificationInformation/classification"
_DATA_ENTRY = "administrativeInformation/dataEntryBy"
_PUBLICATION = "administrativeInformation/publicationAndOwnership"

# Processes

PROCESS_NAME = Binding(
    ProcessName,
    (
        lang("base_name", "baseName"),
        lang("treatment", "treatmentStandardsRoutes"),
        lang("mix_and_location", "mixAndLocationTypes"),
        lang("functional_unit", "functionalUnitFlowProperties"),
    ),
)

PROCESS_INFO = Binding(
    ProcessInfo,
    (
        text("uuid", "UUID"),
        one("name", "name", PROCESS_NAME),
        lang("synonyms", "synonyms"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        lang("comment", "generalComment"),
    ),
)

QUANTITATIVE_REFERENCE = Binding(
    QuantitativeReference,
    (
        text("type", "@type"),
        integers("reference_flow_ids", "referenceToReferenceFlow"),
        lang("functional_unit", "functionalUnitOrOther"),
    ),
)

PROCESS_TIME = Binding(
    ProcessTime,
    (
        text("reference_year", "referenceYear"),
        text("valid_until", "dataSetValidUntil"),
        lang("description", "timeRepresentativenessDescription"),
    ),
)

EXCHANGE = Binding(
    Exchange,
    (
        integer("internal_id", "@dataSetInternalID"),
        one("flow", "referenceToFlowDataSet", REF),
        text("location", "location"),
        text("direction", "exchangeDirection"),
        number("mean_amount", "meanAmount"),
        number("resulting_amount", "resultingAmount"),
        lang("comment", "generalComment"),
    ),
)

LCIA_RESULT = Binding(
    LCIAResult,
    (
        one("method", "referenceToLCIAMethodDataSet", REF),
        number("mean_amount", "meanAmount"),
    ),
)

PROCESS = Binding(
    Process,
    (
        one("info", "processInformation/dataSetInformation", PROCESS_INFO),
        one(
            "quantitative_reference",
            "processInformation/quantitativeReference",
            QUANTITATIVE_REFERENCE,
        ),
        one("time", "processInformation/time", PROCESS_TIME),
        text(
            "location",
            "processInformation/geography/locationOfOperationSupplyOrProduction/@location",
        ),
        lang(
            "technology",
            "processInformation/technology/technologyDescriptionAndIncludedProcesses",
        ),
        text("process_type", "modellingAndValidation/LCIMethodAndAllocation/typeOfDataSet"),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
        many("exchanges", "exchanges/exchange", EXCHANGE),
        many("lcia_results", "LCIAResults/LCIAResult", LCIA_RESULT),
    ),
    root="processDataSet",
)

# Flows

FLOW_NAME = Binding(
    FlowName,
    (
        lang("base_name", "baseName"),
        lang("treatment", "treatmentStandardsRoutes"),
        lang("mix_and_location", "mixAndLocationTypes"),
        lang("properties", "flowProperties"),
    ),
)

FLOW_INFO = Binding(
    FlowInfo,
    (
        text("uuid", "UUID"),
        one("name", "name", FLOW_NAME),
        lang("synonyms", "synonyms"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        many(
            "compartments",
            "classificationInformation/elementaryFlowCategorization/category",
            CATEGORY,
        ),
        text("cas", "CASNumber"),
        text("sum_formula", "sumFormula"),
        lang("comment", "generalComment"),
    ),
)

FLOW_PROPERTY_REF = Binding(
    FlowPropertyRef,
    (
        integer("internal_id", "@dataSetInternalID"),
        one("flow_property", "referenceToFlowPropertyDataSet", REF),
        number("mean_value", "meanValue"),
        lang("comment", "generalComment"),
    ),
)

FLOW = Binding(
    Flow,
    (
        one("info", "flowInformation/dataSetInformation", FLOW_INFO),
        integer(
            "reference_flow_property_id",
            "flowInformation/quantitativeReference/referenceToReferenceFlowProperty",
        ),
        text("flow_type", "modellingAndValidation/LCIMethod/typeOfDataSet"),
        text("location", "flowInformation/geography/locationOfSupply"),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
        many("flow_properties", "flowProperties/flowProperty", FLOW_PROPERTY_REF),
    ),
    root="flowDataSet",
)

# Flow properties

FLOW_PROPERTY_INFO = Binding(
    FlowPropertyInfo,
    (
        text("uuid", "UUID"),
        lang("name", "name"),
        lang("synonyms", "synonyms"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        lang("comment", "generalComment"),
    ),
)

FLOW_PROPERTY = Binding(
    FlowProperty,
    (
        one("info", "flowPropertiesInformation/dataSetInformation", FLOW_PROPERTY_INFO),
        one(
            "reference_unit_group",
            "flowPropertiesInformation/quantitativeReference/referenceToReferenceUnitGroup",
            REF,
        ),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
    ),
    root="flowPropertyDataSet",
)

# Unit groups

UNIT_GROUP_INFO = Binding(
    UnitGroupInfo,
    (
        text("uuid", "UUID"),
        lang("name", "name"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        lang("comment", "generalComment"),
    ),
)

UNIT = Binding(
    Unit,
    (
        integer("internal_id", "@dataSetInternalID"),
        text("name", "name"),
        number("mean_value", "meanValue"),
        lang("comment", "generalComment"),
    ),
)

UNIT_GROUP = Binding(
    UnitGroup,
    (
        one("info", "unitGroupInformation/dataSetInformation", UNIT_GROUP_INFO),
        integer(
            "reference_unit_id",
            "unitGroupInformation/quantitativeReference/referenceToReferenceUnit",
        ),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
        many("units", "units/unit", UNIT),
    ),
    root="unitGroupDataSet",
)

# Sources

SOURCE_INFO = Binding(
    SourceInfo,
    (
        text("uuid", "UUID"),
        lang("short_name", "shortName"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        text("citation", "sourceCitation"),
        text("publication_type", "publicationType"),
        lang("description", "sourceDescriptionOrComment"),
        texts("file_uris", "referenceToDigitalFile/@uri"),
        many("contacts", "referenceToContact", REF),
    ),
)

SOURCE = Binding(
    Source,
    (
        one("info", "sourceInformation/dataSetInformation", SOURCE_INFO),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
    ),
    root="sourceDataSet",
)

# Contacts

CONTACT_INFO = Binding(
    ContactInfo,
    (
        text("uuid", "UUID"),
        lang("short_name", "shortName"),
        lang("name", "name"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        lang("address", "contactAddress"),
        text("telephone", "telephone"),
        text("email", "email"),
        text("www", "WWWAddress"),
    ),
)

CONTACT = Binding(
    Contact,
    (
        one("info", "contactInformation/dataSetInformation", CONTACT_INFO),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
    ),
    root="contactDataSet",
)

# LCIA methods

METHOD_INFO = Binding(
    MethodInfo,
    (
        text("uuid", "UUID"),
        lang("name", "name"),
        texts("methodologies", "methodology"),
        texts("impact_categories", "impactCategory"),
        text("impact_indicator", "impactIndicator"),
        many("classifications", _CLASSIFICATIONS, CLASSIFICATION),
        lang("comment", "generalComment"),
    ),
)

FACTOR = Binding(
    Factor,
    (
        one("flow", "referenceToFlowDataSet", REF),
        text("direction", "exchangeDirection"),
        number("mean_value", "meanValue"),
        text("location", "location"),
    ),
)

METHOD = Binding(
    Method,
    (
        one("info", "LCIAMethodInformation/dataSetInformation", METHOD_INFO),
        one(
            "reference_quantity",
            "LCIAMethodInformation/quantitativeReference/referenceQuantity",
            REF,
        ),
        one("data_entry", _DATA_ENTRY, DATA_ENTRY),
        one("publication", _PUBLICATION, PUBLICATION),
        many("factors", "characterisationFactors/factor", FACTOR),
    ),
    root="LCIAMethodDataSet",
)

DOCUMENT_BINDINGS: Mapping[DataSetType, Binding[Any]] = {
    DataSetType.PROCESS: PROCESS,
    DataSetType.FLOW: FLOW,
    DataSetType.FLOW_PROPERTY: FLOW_PROPERTY,
    DataSetType.UNIT_GROUP: UNIT_GROUP,
    DataSetType.SOURCE: SOURCE,
    DataSetType.CONTACT: CONTACT,
    DataSetType.METHOD: METHOD,
}


def binding_for(data_set_type: DataSetType) -> Binding[Any]:
    """Return the document binding for a data set type."""
    return DOCUMENT_BINDINGS[DataSetType(data_set_type)]
