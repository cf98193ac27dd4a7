"""Reference library: fire code rules, BFP memoranda and NFPA standards."""

from typing import List

from models.reference import Reference
from data.nfpa_guidance import ADDITIONAL_NFPA_STANDARDS

REFERENCE_TYPES = ["fire-code", "nfpa", "memorandum", "guideline"]
REFERENCE_TYPE_LABELS = {
    "fire-code": "Fire Code",
    "nfpa": "NFPA Standard",
    "memorandum": "BFP Memorandum",
    "guideline": "Guideline",
}

FIRE_CODE_REFERENCES: List[Reference] = [
    Reference(
        reference_id="ra9514-rule-1",
        title="RA 9514 Rule 1: Title and Application",
        description="This Rule covers the title of the Code, its scope, application, and interpretation.",
        ref_type="fire-code",
        category="General Provisions",
        content=(
            "Section 1.0.0.1 Title. These Rules shall be known as the Revised Implementing Rules and Regulations "
            "of Republic Act No. 9514, the Revised Fire Code of the Philippines of 2008.\n\n"
            "Section 1.0.0.2 Scope. These Rules govern the implementation of RA 9514 and apply to all persons "
            "and all activities, uses, occupancies and processes within the territorial limit of the Philippines.\n\n"
            "Section 1.0.0.3 Application. These Rules are applied in addition to the pertinent provisions of "
            "other related laws, ordinances, codes, and standards.\n\n"
            "Section 1.0.0.4 Interpretation. The provisions are minimum requirements. Any safeguard in excess of "
            "that required by these Rules shall not be deemed a violation."
        ),
        tags=["general provisions", "scope", "application", "interpretation"],
        date_published="2019-01-01",
    ),
    Reference(
        reference_id="ra9514-rule-2",
        title="RA 9514 Rule 2: Definition of Terms",
        description="This Rule provides the definition of terms used in the Revised Fire Code of the Philippines.",
        ref_type="fire-code",
        category="General Provisions",
        content=(
            "Defines the terms used throughout the Code, including abatement, administrative fine, atrium, "
            "automatic fire suppression system, fire hazard, fire lane, fire protective and fire safety device, "
            "fire safety constructions, hazardous material, occupant load, and means of egress."
        ),
        tags=["definitions", "terms", "glossary"],
        date_published="2019-01-01",
    ),
    Reference(
        reference_id="ra9514-rule-10",
        title="RA 9514 Rule 10: Fire Protection Features",
        description=(
            "This Rule covers the fire protection features required for various occupancies, including "
            "automatic sprinkler systems, fire detection systems, and other fire safety requirements."
        ),
        ref_type="fire-code",
        category="Fire Protection Features",
        content=(
            "Section 10.2.6.4 Automatic Sprinkler System. Required in buildings more than 15 m or five storeys "
            "high; buildings of two or more storeys with a total floor area over 2,000 m2; shopping centers, "
            "malls and public markets regardless of height; factories and storage buildings of combustible "
            "materials over 1,000 m2; department stores, hotels and hospitals over 1,000 m2; all buildings of "
            "four or more storeys; and all high-rise buildings.\n\n"
            "Section 10.2.6.5 Fire Detection and Alarm System. Required in all buildings three storeys or more; "
            "mixed occupancies; hotels, dormitories and lodging houses; hospitals and nursing homes; educational "
            "and assembly occupancies; commercial buildings and markets; detention facilities; industrial "
            "buildings; storage complexes; and call centers."
        ),
        tags=["fire protection", "sprinkler systems", "fire detection", "alarm systems"],
        date_published="2019-01-01",
    ),
    Reference(
        reference_id="ra9514-rule-11",
        title="RA 9514 Rule 11: Means of Egress",
        description=(
            "This Rule covers the requirements for means of egress, including exit access, exit, and exit "
            "discharge components."
        ),
        ref_type="fire-code",
        category="Means of Egress",
        content=(
            "Every building shall be provided with exits sufficient to permit the prompt escape of occupants. "
            "Exits shall be arranged so they are readily accessible at all times, and the number of exits shall "
            "be based on the occupant load. Exit doors shall swing in the direction of exit travel, exit "
            "stairways shall be enclosed, and exits shall be marked with readily visible illuminated signs."
        ),
        tags=["egress", "exits", "escape routes", "evacuation"],
        date_published="2019-01-01",
    ),
    Reference(
        reference_id="ra9514-rule-13",
        title="RA 9514 Rule 13: Hazardous Materials and Chemicals",
        description=(
            "This Rule covers the requirements for the storage, handling, and use of hazardous materials and "
            "chemicals."
        ),
        ref_type="fire-code",
        category="Hazardous Materials",
        content=(
            "Covers the storage, handling and use of flammable and combustible liquids, flammable solids, "
            "oxidizers, toxic and corrosive materials, compressed gases and explosives. Storage permits, "
            "separation distances, container requirements, ventilation and spill control are prescribed per "
            "hazard class."
        ),
        tags=["hazardous materials", "chemicals", "storage", "handling"],
        date_published="2019-01-01",
    ),
]

BFP_MEMORANDA: List[Reference] = [
    Reference(
        reference_id="memo-2020-001",
        title="BFP Memorandum Circular 2020-001",
        description="Guidelines on the Implementation of Fire Safety Inspection Certificate (FSIC) for Business Permit",
        ref_type="memorandum",
        category="Business Permits",
        content=(
            "The BFP issues the FSIC as a requirement for the Business Permit. Inspection is conducted within "
            "three working days of application. A compliant establishment receives its FSIC within two working "
            "days after inspection; a non-compliant one receives a Notice of Disapproval listing the violated "
            "provisions and is given thirty days to comply."
        ),
        tags=["FSIC", "business permit", "inspection", "compliance"],
        date_published="2020-01-15",
    ),
    Reference(
        reference_id="memo-2020-002",
        title="BFP Memorandum Circular 2020-002",
        description="Revised Guidelines on the Conduct of Fire Safety Inspection during the COVID-19 Pandemic",
        ref_type="memorandum",
        category="COVID-19 Protocols",
        content=(
            "Fire safety inspections continue during the pandemic with health protocols in place. Inspectors "
            "wear PPE, observe physical distancing and limit time on site. Documents may be submitted "
            "electronically, and establishments under quarantine restrictions may be inspected remotely where "
            "practicable."
        ),
        tags=["COVID-19", "pandemic", "inspection protocols", "PPE"],
        date_published="2020-03-20",
    ),
    Reference(
        reference_id="memo-2021-003",
        title="BFP Memorandum Circular 2021-003",
        description=(
            "Guidelines on the Implementation of the Fire Safety Inspection and Certification for Buildings "
            "with Photovoltaic (PV) Installations"
        ),
        ref_type="memorandum",
        category="Solar Installations",
        content=(
            "Buildings with PV installations must provide firefighter access pathways on the roof, permanent "
            "system labels, and a rapid shutdown capability. PV equipment must be listed, installed by licensed "
            "professionals, and inspected as part of the FSIC process."
        ),
        tags=["photovoltaic", "solar panels", "renewable energy", "electrical safety"],
        date_published="2021-05-10",
    ),
    Reference(
        reference_id="memo-2021-005",
        title="BFP Memorandum Circular 2021-005",
        description="Guidelines on the Implementation of Fire Safety Requirements for High-Rise Buildings",
        ref_type="memorandum",
        category="High-Rise Buildings",
        content=(
            "A high-rise building has an occupied floor more than 23 meters above the lowest level of fire "
            "department vehicle access. High-rise buildings require an automatic fire detection and alarm system "
            "connected to a 24/7 monitoring station with 24 hours of standby power; full sprinkler protection "
            "per NFPA 13 with a water flow alarm; and a Class I standpipe system per NFPA 14 with a fire "
            "department connection and 2 hours of emergency power for the fire pump. Existing buildings have one "
            "year to comply."
        ),
        tags=["high-rise", "standpipe", "sprinkler", "fire detection"],
        date_published="2021-08-15",
    ),
    Reference(
        reference_id="memo-2022-002",
        title="BFP Memorandum Circular 2022-002",
        description=(
            "Guidelines on the Implementation of Fire Safety Requirements for Hospitals and Healthcare Facilities"
        ),
        ref_type="memorandum",
        category="Healthcare Facilities",
        content=(
            "Hospitals and healthcare facilities require full sprinkler protection, addressable fire detection, "
            "smoke compartmentation of patient areas, defend-in-place evacuation procedures, and an emergency "
            "power supply for life safety and critical care systems. Staff must be trained in horizontal "
            "evacuation and drills are held quarterly."
        ),
        tags=["healthcare", "hospitals", "patient safety", "emergency power"],
        date_published="2022-03-20",
    ),
]

NFPA_REFERENCES: List[Reference] = [
    Reference(
        reference_id=std["code"].lower().replace(" ", "-"),
        title=f"{std['code']}: {std['title']}",
        description=std["relevance"],
        ref_type="nfpa",
        category="NFPA Standards",
        url="https://www.nfpa.org/codes-and-standards",
        tags=[std["code"].lower(), "nfpa"],
    )
    for std in ADDITIONAL_NFPA_STANDARDS
]

REFERENCES: List[Reference] = FIRE_CODE_REFERENCES + BFP_MEMORANDA + NFPA_REFERENCES
