from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Iterable

import pytest
import structlog

FLOW_UUID = "123e4567-e89b-12d3-a456-426614174000"
SECOND_FLOW_UUID = "2f1b8f3e-4b2a-4c7e-9b1d-7d6a5c4b3a21"
PROCESS_UUID = "6e1c2f9a-0b5d-4a7e-8c3f-1d2e3f4a5b6c"
FLOW_PROPERTY_UUID = "93a60a56-a3c8-11da-a746-0800200b9a66"
UNIT_GROUP_UUID = "93a60a57-a4c8-11da-a746-0800200c9a66"
SOURCE_UUID = "a97a0155-0234-4b87-b4ce-a45da52f2a40"
CONTACT_UUID = "f4b4c314-8c4c-4c83-968f-5b3c7724f6a8"
METHOD_UUID = "b2ad6494-c78d-11e6-9d9d-cec0c932ce01"

_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
_COMMON = 'xmlns:common="http://lca.jrc.it/ILCD/Common"'


def flow_xml(uuid: str = FLOW_UUID, reference_id: int = 2, base_name: str = "Steel") -> str:
    return f"""{_HEADER}<flowDataSet xmlns="http://lca.jrc.it/ILCD/Flow" {_COMMON} version="1.1">
  <flowInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <name>
        <baseName xml:lang="en">{base_name}</baseName>
        <baseName xml:lang="de">Stahl</baseName>
        <treatmentStandardsRoutes xml:lang="en">hot rolled</treatmentStandardsRoutes>
      </name>
      <common:synonyms xml:lang="en">iron alloy</common:synonyms>
      <classificationInformation>
        <common:classification name="ILCD">
          <common:class level="0" classId="1">Materials production</common:class>
          <common:class level="1" classId="1.1">Metals and semimetals</common:class>
        </common:classification>
      </classificationInformation>
      <CASNumber>7439-89-6</CASNumber>
      <common:generalComment xml:lang="en">Generic steel</common:generalComment>
      <common:other>ignored extension content</common:other>
    </dataSetInformation>
    <quantitativeReference>
      <referenceToReferenceFlowProperty>{reference_id}</referenceToReferenceFlowProperty>
    </quantitativeReference>
    <geography>
      <locationOfSupply>GLO</locationOfSupply>
    </geography>
  </flowInformation>
  <modellingAndValidation>
    <LCIMethod>
      <typeOfDataSet>Product flow</typeOfDataSet>
    </LCIMethod>
  </modellingAndValidation>
  <administrativeInformation>
    <dataEntryBy>
      <common:timeStamp>2024-01-01T00:00:00</common:timeStamp>
      <common:referenceToDataSetFormat refObjectId="{SOURCE_UUID}" type="source data set" uri="../sources/{SOURCE_UUID}.xml" version="03.00.003">
        <common:shortDescription xml:lang="en">ILCD format</common:shortDescription>
      </common:referenceToDataSetFormat>
    </dataEntryBy>
    <publicationAndOwnership>
      <common:dataSetVersion>01.00.000</common:dataSetVersion>
      <common:permanentDataSetURI>https://example.org/flows/{uuid}</common:permanentDataSetURI>
      <common:referenceToOwnershipOfDataSet refObjectId="{CONTACT_UUID}" type="contact data set">
        <common:shortDescription xml:lang="en">Data owner</common:shortDescription>
      </common:referenceToOwnershipOfDataSet>
    </publicationAndOwnership>
  </administrativeInformation>
  <flowProperties>
    <flowProperty dataSetInternalID="1">
      <referenceToFlowPropertyDataSet refObjectId="{FLOW_PROPERTY_UUID}" type="flow property data set" uri="../flowproperties/{FLOW_PROPERTY_UUID}.xml">
        <common:shortDescription xml:lang="en">Mass</common:shortDescription>
      </referenceToFlowPropertyDataSet>
      <meanValue>1.0</meanValue>
    </flowProperty>
    <flowProperty dataSetInternalID="2">
      <referenceToFlowPropertyDataSet refObjectId="93a60a56-a3c8-22da-a746-0800200c9a66" type="flow property data set">
        <common:shortDescription xml:lang="en">Volume</common:shortDescription>
      </referenceToFlowPropertyDataSet>
      <meanValue>0.127</meanValue>
    </flowProperty>
  </flowProperties>
</flowDataSet>
"""


def process_xml(uuid: str = PROCESS_UUID) -> str:
    return f"""{_HEADER}<processDataSet xmlns="http://lca.jrc.it/ILCD/Process" {_COMMON} version="1.1">
  <processInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <name>
        <baseName xml:lang="en">Steel production</baseName>
      </name>
      <classificationInformation>
        <common:classification name="ISIC">
          <common:class level="0" classId="C">Manufacturing</common:class>
        </common:classification>
      </classificationInformation>
    </dataSetInformation>
    <quantitativeReference type="Reference flow(s)">
      <referenceToReferenceFlow>2</referenceToReferenceFlow>
    </quantitativeReference>
    <time>
      <common:referenceYear>2020</common:referenceYear>
    </time>
    <geography>
      <locationOfOperationSupplyOrProduction location="CN"/>
    </geography>
  </processInformation>
  <modellingAndValidation>
    <LCIMethodAndAllocation>
      <typeOfDataSet>Unit process, single operation</typeOfDataSet>
    </LCIMethodAndAllocation>
  </modellingAndValidation>
  <administrativeInformation>
    <publicationAndOwnership>
      <common:dataSetVersion>02.01.000</common:dataSetVersion>
    </publicationAndOwnership>
  </administrativeInformation>
  <exchanges>
    <exchange dataSetInternalID="1">
      <referenceToFlowDataSet refObjectId="{SECOND_FLOW_UUID}" type="flow data set">
        <common:shortDescription xml:lang="en">Iron ore</common:shortDescription>
      </referenceToFlowDataSet>
      <exchangeDirection>Input</exchangeDirection>
      <meanAmount>1.5</meanAmount>
      <resultingAmount>1.5</resultingAmount>
    </exchange>
    <exchange dataSetInternalID="2">
      <referenceToFlowDataSet refObjectId="{FLOW_UUID}" type="flow data set">
        <common:shortDescription xml:lang="en">Steel</common:shortDescription>
      </referenceToFlowDataSet>
      <exchangeDirection>Output</exchangeDirection>
      <meanAmount>1</meanAmount>
      <resultingAmount>1</resultingAmount>
    </exchange>
  </exchanges>
</processDataSet>
"""


def flow_property_xml(uuid: str = FLOW_PROPERTY_UUID) -> str:
    return f"""{_HEADER}<flowPropertyDataSet xmlns="http://lca.jrc.it/ILCD/FlowProperty" {_COMMON} version="1.1">
  <flowPropertiesInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <common:name xml:lang="en">Mass</common:name>
    </dataSetInformation>
    <quantitativeReference>
      <referenceToReferenceUnitGroup refObjectId="{UNIT_GROUP_UUID}" type="unit group data set">
        <common:shortDescription xml:lang="en">Units of mass</common:shortDescription>
      </referenceToReferenceUnitGroup>
    </quantitativeReference>
  </flowPropertiesInformation>
</flowPropertyDataSet>
"""


def unit_group_xml(uuid: str = UNIT_GROUP_UUID) -> str:
    return f"""{_HEADER}<unitGroupDataSet xmlns="http://lca.jrc.it/ILCD/UnitGroup" {_COMMON} version="1.1">
  <unitGroupInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <common:name xml:lang="en">Units of mass</common:name>
    </dataSetInformation>
    <quantitativeReference>
      <referenceToReferenceUnit>1</referenceToReferenceUnit>
    </quantitativeReference>
  </unitGroupInformation>
  <units>
    <unit dataSetInternalID="0">
      <name>g</name>
      <meanValue>0.001</meanValue>
    </unit>
    <unit dataSetInternalID="1">
      <name>kg</name>
      <meanValue>1.0</meanValue>
    </unit>
  </units>
</unitGroupDataSet>
"""


def source_xml(uuid: str = SOURCE_UUID) -> str:
    return f"""{_HEADER}<sourceDataSet xmlns="http://lca.jrc.it/ILCD/Source" {_COMMON} version="1.1">
  <sourceInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <common:shortName xml:lang="en">ILCD format</common:shortName>
      <sourceCitation>ILCD data format 1.1</sourceCitation>
      <publicationType>Software or database</publicationType>
      <referenceToDigitalFile uri="../external_docs/ilcd.pdf"/>
      <referenceToDigitalFile uri="https://eplca.jrc.ec.europa.eu/"/>
      <referenceToContact refObjectId="{CONTACT_UUID}" type="contact data set"/>
    </dataSetInformation>
  </sourceInformation>
</sourceDataSet>
"""


def contact_xml(uuid: str = CONTACT_UUID) -> str:
    return f"""{_HEADER}<contactDataSet xmlns="http://lca.jrc.it/ILCD/Contact" {_COMMON} version="1.1">
  <contactInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <common:shortName xml:lang="en">Tiangong</common:shortName>
      <common:name xml:lang="en">Tiangong LCA Data Working Group</common:name>
      <email>lca@example.org</email>
      <WWWAddress>https://www.tiangong.earth</WWWAddress>
    </dataSetInformation>
  </contactInformation>
</contactDataSet>
"""


def method_xml(uuid: str = METHOD_UUID) -> str:
    return f"""{_HEADER}<LCIAMethodDataSet xmlns="http://lca.jrc.it/ILCD/LCIAMethod" {_COMMON} version="1.1">
  <LCIAMethodInformation>
    <dataSetInformation>
      <common:UUID>{uuid}</common:UUID>
      <common:name xml:lang="en">Climate change</common:name>
      <methodology>EF 3.1</methodology>
      <impactCategory>Climate change</impactCategory>
      <impactIndicator>Radiative forcing as GWP100</impactIndicator>
    </dataSetInformation>
    <quantitativeReference>
      <referenceQuantity refObjectId="6a37f984-a4b3-458a-a20a-64418c145fa2" type="flow property data set">
        <common:shortDescription xml:lang="en">kg CO2 eq.</common:shortDescription>
      </referenceQuantity>
    </quantitativeReference>
  </LCIAMethodInformation>
  <characterisationFactors>
    <factor>
      <referenceToFlowDataSet refObjectId="08a91e70-3ddc-11dd-923d-0050c2490048" type="flow data set">
        <common:shortDescription xml:lang="en">carbon dioxide</common:shortDescription>
      </referenceToFlowDataSet>
      <exchangeDirection>Output</exchangeDirection>
      <meanValue>1.0</meanValue>
    </factor>
    <factor>
      <referenceToFlowDataSet refObjectId="0795345f-c7ae-410c-ad25-1845784c75f5" type="flow data set"/>
      <exchangeDirection>Output</exchangeDirection>
      <meanValue>29.8</meanValue>
    </factor>
  </characterisationFactors>
</LCIAMethodDataSet>
"""


def write_package(path: Path, entries: Iterable[tuple[str, str | bytes]]) -> Path:
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries:
            archive.writestr(name, content)
    return path


def default_entries() -> list[tuple[str, str | bytes]]:
    return [
        ("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n"),
        (f"ILCD/processes/{PROCESS_UUID}.xml", process_xml()),
        (f"ILCD/flows/{FLOW_UUID}.xml", flow_xml()),
        (f"ILCD/flows/{SECOND_FLOW_UUID}.xml", flow_xml(SECOND_FLOW_UUID, 1, "Iron ore")),
        (f"ILCD/flowproperties/{FLOW_PROPERTY_UUID}.xml", flow_property_xml()),
        (f"ILCD/unitgroups/{UNIT_GROUP_UUID}.xml", unit_group_xml()),
        (f"ILCD/sources/{SOURCE_UUID}.xml", source_xml()),
        ("ILCD/external_docs/ilcd.pdf", b"%PDF-1.4 binary"),
        (f"ILCD/contacts/{CONTACT_UUID}.xml", contact_xml()),
        (f"ILCD/lciamethods/{METHOD_UUID}.xml", method_xml()),
    ]


@pytest.fixture
def package_path(tmp_path: Path) -> Path:
    return write_package(tmp_path / "package.zip", default_entries())


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
