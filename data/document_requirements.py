"""Documents an establishment must keep on file (RA 9514 IRR 2019)."""

from typing import List

from models.document import DocumentRequirement

ALL_WITH_SPRINKLERS = "all-with-sprinklers"
ALL_WITH_DETECTION = "all-with-detection"

# Occupancy id prefixes a document may list instead of an exact id
OCCUPANCY_CATEGORIES = [
    "assembly", "residential", "business", "mercantile",
    "industrial", "storage", "educational", "healthcare",
]

DOCUMENT_REQUIREMENTS: List[DocumentRequirement] = [
    DocumentRequirement(
        "fsic", "Fire Safety Inspection Certificate (FSIC)",
        "Required for all occupancies before operation and must be renewed annually.",
        ("all",), "RA 9514 IRR Rule 10.1.1",
        "The FSIC certifies that a building or structure has complied with the fire safety and protective "
        "requirements of the Fire Code. It must be displayed in a conspicuous place within the premises.",
    ),
    DocumentRequirement(
        "fire-safety-plan", "Fire Safety Plan",
        "A comprehensive plan detailing fire prevention measures, emergency procedures, and evacuation routes.",
        ("all",), "RA 9514 IRR Rule 10.2.1",
        "Must include floor plans showing exits, fire protection equipment locations, and evacuation routes. "
        "The plan should be updated annually or whenever there are significant changes to the building layout "
        "or operations.",
    ),
    DocumentRequirement(
        "fire-drill-records", "Fire Drill Records",
        "Documentation of regular fire drills conducted on the premises.",
        ("assembly", "educational", "healthcare", "residential-hotel", "business", "mercantile",
         "industrial", "storage-high-hazard"),
        "RA 9514 IRR Rule 10.2.2.3",
        "Fire drills must be conducted at least twice a year for most occupancies, and quarterly for high-rise "
        "buildings, hospitals, schools, and assembly occupancies. Records must include date, time, "
        "participants, and evaluation results.",
    ),
    DocumentRequirement(
        "maintenance-records", "Fire Protection Equipment Maintenance Records",
        "Documentation of regular inspection, testing, and maintenance of all fire protection equipment.",
        ("all",), "RA 9514 IRR Rule 10.2.6.8",
        "Records must include dates of inspection, tests performed, results, and any repairs or replacements "
        "made. Must be maintained for at least 3 years and be available for inspection by fire officials.",
    ),
    DocumentRequirement(
        "electrical-inspection", "Electrical Inspection Certificate",
        "Certification that the electrical system has been inspected and complies with the Philippine "
        "Electrical Code.",
        ("all",), "RA 9514 IRR Rule 10.3.1",
        "Must be renewed every 2 years or whenever significant modifications are made to the electrical "
        "system. The inspection must be conducted by a licensed electrical engineer.",
    ),
    DocumentRequirement(
        "building-permit", "Building Permit and Certificate of Occupancy",
        "Official permits certifying that the building was constructed according to approved plans and is "
        "safe for occupancy.",
        ("all",), "RA 9514 IRR Rule 10.1.2",
        "The Certificate of Occupancy must specify the building's approved use and occupant load. Any change "
        "in use requires a new Certificate of Occupancy.",
    ),
    DocumentRequirement(
        "hazmat-inventory", "Hazardous Materials Inventory",
        "Detailed inventory of all hazardous materials stored or used on the premises.",
        ("industrial", "storage-high-hazard", "business-laboratory", "educational-laboratory"),
        "RA 9514 IRR Rule 10.4.1",
        "Must include material safety data sheets (MSDS), quantities, locations, and handling procedures. The "
        "inventory must be updated whenever there are changes in the types or quantities of hazardous materials.",
    ),
    DocumentRequirement(
        "fire-safety-officer", "Fire Safety Officer Certification",
        "Certification for the designated Fire Safety Officer(s) on the premises.",
        ("assembly", "healthcare", "residential-hotel", "business-high-rise", "mercantile-mall", "industrial"),
        "RA 9514 IRR Rule 10.2.1.3",
        "Buildings with an occupant load of 500 or more, or high-rise buildings, must have at least one "
        "certified Fire Safety Officer on duty during operating hours. The certification must be renewed "
        "every 2 years.",
    ),
    DocumentRequirement(
        "fire-insurance", "Fire Insurance Policy",
        "Insurance policy covering fire damage to the building and its contents.",
        ("all",), "RA 9514 IRR Rule 10.1.4",
        "The policy must provide adequate coverage based on the building's value and contents. Proof of "
        "current coverage must be available for inspection.",
    ),
    DocumentRequirement(
        "emergency-evacuation-plan", "Emergency Evacuation Plan",
        "Detailed plan for evacuating occupants in case of fire or other emergencies.",
        ("all",), "RA 9514 IRR Rule 10.2.2.1",
        "Must include evacuation routes, assembly areas, procedures for assisting persons with disabilities, "
        "and responsibilities of designated staff. The plan must be posted in conspicuous locations "
        "throughout the building.",
    ),
    DocumentRequirement(
        "fire-safety-clearance", "Fire Safety Clearance for Special Events",
        "Special clearance required for temporary events or gatherings.",
        ("assembly-temporary",), "RA 9514 IRR Rule 10.2.3.5",
        "Required for events with an expected attendance of 50 or more persons. Must be obtained at least "
        "3 days before the event. The clearance specifies maximum occupancy and required safety measures.",
    ),
    DocumentRequirement(
        "sprinkler-certification", "Sprinkler System Certification",
        "Certification that the automatic sprinkler system has been properly installed and tested.",
        (ALL_WITH_SPRINKLERS,), "RA 9514 IRR Rule 10.2.6.4",
        "Must be issued by a licensed professional mechanical engineer. The certification must be renewed "
        "after any modifications to the system or every 5 years, whichever comes first.",
    ),
    DocumentRequirement(
        "fire-detection-certification", "Fire Detection System Certification",
        "Certification that the fire detection and alarm system has been properly installed and tested.",
        (ALL_WITH_DETECTION,), "RA 9514 IRR Rule 10.2.6.5",
        "Must be issued by a licensed professional electronics engineer. The certification must be renewed "
        "after any modifications to the system or every 3 years, whichever comes first.",
    ),
]
