"""EA self-assessment question bank.

Questions are grouped into nine categories and identified as ``Q<category>.<n>``.
Every answer carries a 1-5 maturity score; weaker answers also name the gap
rules they raise. Weights follow the 1x / 1.5x / 2x / 3x scheme: foundational
capabilities (identity, integration backbone, data platform) weigh more than
descriptive profile questions.

``affects_components`` mirrors the ``related_questions`` declared on each
taxonomy component, so a component is scored by exactly the questions that
list it.
"""

from ea_assessment.core.models import QUESTION_CATEGORIES, Answer, Question

QUESTION_BANK: tuple[Question, ...] = (
    # -----------------------------------------------------------------------
    # Company Profile
    # -----------------------------------------------------------------------
    Question(
        question_id="Q1.1",
        category="Company Profile",
        text="How many employees does your organisation have?",
        answers=(
            Answer("Fewer than 50", 3),
            Answer("50-249", 3),
            Answer("250-999", 3),
            Answer("1,000-4,999", 3),
            Answer("5,000 or more", 3),
        ),
        affects_components=(),
        is_required=True,
    ),
    Question(
        question_id="Q1.2",
        category="Company Profile",
        text=(
            "How clearly are accountabilities for technology and architecture "
            "decisions defined in your organisational structure?"
        ),
        answers=(
            Answer("Nobody owns architecture decisions", 1, ("G001",)),
            Answer("IT leadership decides case by case", 2),
            Answer("A named architecture function exists", 3),
            Answer("Architecture board with business representation", 4),
            Answer("Federated ownership with clear decision rights", 5),
        ),
        affects_components=("1.3",),
    ),
    Question(
        question_id="Q1.3",
        category="Company Profile",
        text=(
            "How are your products, services and business capabilities delivered "
            "to customers across digital channels?"
        ),
        answers=(
            Answer("Mostly offline or manual channels", 1, ("G033",)),
            Answer("Web presence only, no mobile experience", 2, ("G033",)),
            Answer("Web and basic mobile apps", 3),
            Answer("Omnichannel with shared capability model", 4),
            Answer("Capability-mapped, API-enabled digital products", 5),
        ),
        affects_components=("1.1", "1.4", "2.4", "2.6"),
    ),
    # -----------------------------------------------------------------------
    # Strategic Drivers
    # -----------------------------------------------------------------------
    Question(
        question_id="Q2.1",
        category="Strategic Drivers",
        text=(
            "Is there a documented business strategy that explicitly drives "
            "technology investment decisions?"
        ),
        answers=(
            Answer("No documented strategy", 1, ("G001", "G002")),
            Answer("Strategy exists but is not linked to IT", 2, ("G002",)),
            Answer("Strategy documented and communicated annually", 3),
            Answer("Strategy managed with KPIs and reviewed quarterly", 4),
            Answer("Strategy drives all IT investment with live tracking", 5),
        ),
        affects_components=(
            "0.1", "0.2", "0.4", "0.7", "0.8", "0.10",
            "1.7", "1.8", "8.1", "8.2", "8.3", "8.7", "8.8", "9.10",
        ),
        weight=2.0,
        is_required=True,
    ),
    Question(
        question_id="Q2.2",
        category="Strategic Drivers",
        text=(
            "How well does your organisation track regulatory, privacy and "
            "compliance obligations that shape its architecture?"
        ),
        answers=(
            Answer("Obligations are not tracked", 1, ("G026",)),
            Answer("Tracked reactively after audits", 2),
            Answer("Register of obligations maintained by compliance", 3),
            Answer("Obligations mapped to controls and systems", 4),
            Answer("Continuous compliance with automated evidence", 5),
        ),
        affects_components=("0.3", "0.6", "0.8", "1.6", "3.12", "6.12", "6.14"),
        weight=1.5,
    ),
    Question(
        question_id="Q2.3",
        category="Strategic Drivers",
        text=(
            "Does your organisation follow an Enterprise Architecture framework "
            "with a maintained technology roadmap?"
        ),
        answers=(
            Answer("No framework and no roadmap", 1, ("G001", "G002")),
            Answer("Informal principles, no roadmap", 2, ("G001",)),
            Answer("Framework adopted, roadmap partly maintained", 3, ("G002",)),
            Answer("Framework and 3-year roadmap actively governed", 4),
            Answer("Roadmap drives portfolio funding and is reviewed quarterly", 5),
        ),
        affects_components=("0.1", "0.5", "0.9", "0.10", "9.1"),
        weight=2.0,
        is_required=True,
    ),
    Question(
        question_id="Q2.4",
        category="Strategic Drivers",
        text=(
            "How does your organisation balance innovation against accumulated "
            "technical debt and budget constraints?"
        ),
        answers=(
            Answer("Technical debt is not tracked", 1, ("G038",)),
            Answer("Debt is known but never funded", 2, ("G038",)),
            Answer("Debt addressed within major projects", 3),
            Answer("Fixed capacity reserved for debt and innovation", 4),
            Answer("Portfolio-level debt and innovation budgets with metrics", 5),
        ),
        affects_components=("0.3", "0.7"),
    ),
    # -----------------------------------------------------------------------
    # Applications & Systems
    # -----------------------------------------------------------------------
    Question(
        question_id="Q3.1",
        category="Applications & Systems",
        text="What ERP platform supports finance, procurement and operations?",
        answers=(
            Answer("No ERP - spreadsheets and point tools", 1, ("G005",)),
            Answer("Legacy ERP nearing end of support (e.g. SAP ECC)", 2, ("G003",)),
            Answer("On-premises ERP on a supported release", 3),
            Answer("Modern cloud ERP, partially adopted", 4),
            Answer("Modern cloud ERP, fully adopted and integrated", 5),
        ),
        affects_components=("2.1", "2.5"),
        weight=2.0,
        is_required=True,
    ),
    Question(
        question_id="Q3.2",
        category="Applications & Systems",
        text="How would you describe the state of your CRM and customer data?",
        answers=(
            Answer("No CRM", 1, ("G006",)),
            Answer("CRM with more than 15% duplicate records", 2, ("G006",)),
            Answer("CRM in place with periodic clean-ups", 3),
            Answer("CRM with data quality rules and ownership", 4),
            Answer("Single customer view shared across channels", 5),
        ),
        affects_components=("2.2",),
        weight=1.5,
    ),
    Question(
        question_id="Q3.3",
        category="Applications & Systems",
        text="How are HR and workforce management processes supported?",
        answers=(
            Answer("Paper and spreadsheets", 1),
            Answer("Payroll system only", 2),
            Answer("Core HR system with limited self-service", 3),
            Answer("Integrated HCM suite", 4),
            Answer("HCM suite with workforce analytics and planning", 5),
        ),
        affects_components=("2.3",),
    ),
    Question(
        question_id="Q3.4",
        category="Applications & Systems",
        text=(
            "How well governed is your portfolio of collaboration tools and SaaS "
            "point solutions?"
        ),
        answers=(
            Answer("Unmanaged SaaS sprawl", 1),
            Answer("Inventory exists but is incomplete", 2),
            Answer("Inventory with procurement controls", 3),
            Answer("Rationalised portfolio with standards", 4),
            Answer("Continuously optimised portfolio with usage metrics", 5),
        ),
        affects_components=("0.9", "2.7", "2.8"),
    ),
    Question(
        question_id="Q3.5",
        category="Applications & Systems",
        text="How maintainable are your custom-built applications?",
        answers=(
            Answer("Undocumented legacy code nobody wants to touch", 1, ("G038",)),
            Answer("Documented but heavily customised and fragile", 2, ("G038",)),
            Answer("Maintained with occasional refactoring", 3),
            Answer("Modular codebase with ownership per service", 4),
            Answer("Continuously modernised with quality gates", 5),
        ),
        affects_components=("2.9",),
    ),
    Question(
        question_id="Q3.7",
        category="Applications & Systems",
        text=(
            "How well are industry-specific applications and their contracts "
            "managed?"
        ),
        answers=(
            Answer("Contracts and renewals are not tracked", 1),
            Answer("Tracked by individual departments", 2),
            Answer("Central register of applications and contracts", 3),
            Answer("Lifecycle management with vendor reviews", 4),
            Answer("Strategic vendor management with outcome-based contracts", 5),
        ),
        affects_components=("1.9", "2.6"),
    ),
    Question(
        question_id="Q3.8",
        category="Applications & Systems",
        text=(
            "How consistent are the engineering and user interface standards "
            "across your custom applications?"
        ),
        answers=(
            Answer("Every team builds its own way", 1, ("G035", "G030")),
            Answer("Some shared libraries, little test automation", 2, ("G030",)),
            Answer("Shared coding standards, no design system", 3, ("G035",)),
            Answer("Design system and automated tests on most apps", 4),
            Answer("Enterprise design system and quality gates everywhere", 5),
        ),
        affects_components=("2.9",),
    ),
    Question(
        question_id="Q3.9",
        category="Applications & Systems",
        text="How are application services exposed to other systems and partners?",
        answers=(
            Answer("Direct database access or file drops", 1, ("G034", "G041")),
            Answer("Ad-hoc APIs without documentation", 2, ("G034", "G041")),
            Answer("Documented APIs without versioning policy", 3, ("G041",)),
            Answer("Versioned APIs with OpenAPI contracts", 4),
            Answer("API-first with developer portal and lifecycle management", 5),
        ),
        affects_components=("2.10", "4.7"),
        weight=1.5,
    ),
    # -----------------------------------------------------------------------
    # Data & Analytics
    # -----------------------------------------------------------------------
    Question(
        question_id="Q4.1",
        category="Data & Analytics",
        text="What analytical data platform does your organisation use?",
        answers=(
            Answer("No data warehouse or data lake", 1, ("G007", "G012")),
            Answer("Departmental databases and extracts", 2, ("G007",)),
            Answer("Traditional on-premises data warehouse", 3, ("G012",)),
            Answer("Cloud data warehouse or data lake", 4),
            Answer("Lakehouse with batch and real-time streaming", 5),
        ),
        affects_components=("3.2", "3.3", "3.4", "3.6", "3.7", "3.13"),
        weight=2.0,
        is_required=True,
    ),
    Question(
        question_id="Q4.2",
        category="Data & Analytics",
        text="How are master data and data definitions governed?",
        answers=(
            Answer("No master data management", 1, ("G008",)),
            Answer("Master data duplicated across systems", 2, ("G008",)),
            Answer("MDM for one domain (e.g. customer)", 3),
            Answer("Multi-domain MDM with a data catalogue", 4),
            Answer("Governed MDM with stewardship and lineage", 5),
        ),
        affects_components=("1.5", "3.1", "3.5"),
        weight=1.5,
    ),
    Question(
        question_id="Q4.3",
        category="Data & Analytics",
        text="How is management reporting and business intelligence produced?",
        answers=(
            Answer("Spreadsheets compiled by hand", 1, ("G009",)),
            Answer("Static reports requested from IT", 2, ("G009",)),
            Answer("BI platform used by analysts", 3),
            Answer("Self-service BI with governed data models", 4),
            Answer("Embedded, real-time analytics in business processes", 5),
        ),
        affects_components=("1.8", "3.8", "3.10", "8.4"),
        weight=1.5,
    ),
    Question(
        question_id="Q4.4",
        category="Data & Analytics",
        text="What predictive analytics or machine learning capability do you have?",
        answers=(
            Answer("None", 1, ("G011",)),
            Answer("Occasional experiments by individuals", 2, ("G011",)),
            Answer("A data science team with ad-hoc models", 3),
            Answer("ML platform with models in production", 4),
            Answer("MLOps with monitored, retrained production models", 5),
        ),
        affects_components=("3.9",),
    ),
    Question(
        question_id="Q4.5",
        category="Data & Analytics",
        text="Is there a data governance and data quality programme?",
        answers=(
            Answer("No governance or quality measurement", 1, ("G010",)),
            Answer("Quality issues fixed when reported", 2, ("G010",)),
            Answer("Data owners named for key domains", 3),
            Answer("Quality KPIs monitored by data stewards", 4),
            Answer("Automated profiling and quality gates in pipelines", 5),
        ),
        affects_components=("3.11",),
        weight=1.5,
    ),
    Question(
        question_id="Q4.6",
        category="Data & Analytics",
        text="How is sensitive and personal data protected?",
        answers=(
            Answer("No classification or encryption", 1, ("G026",)),
            Answer("Encryption on some systems only", 2, ("G026",)),
            Answer("Classification policy and encryption at rest", 3),
            Answer("DLP controls with privacy impact assessments", 4),
            Answer("Privacy by design with automated data discovery", 5),
        ),
        affects_components=("3.12",),
        weight=2.0,
    ),
    # -----------------------------------------------------------------------
    # Integration
    # -----------------------------------------------------------------------
    Question(
        question_id="Q5.1",
        category="Integration",
        text="How do you collaborate and exchange data with partners?",
        answers=(
            Answer("Email and manual re-keying", 1),
            Answer("File exchange on request", 2),
            Answer("Scheduled file transfers and EDI", 3),
            Answer("Partner APIs for key processes", 4),
            Answer("Partner ecosystem with self-service onboarding", 5),
        ),
        affects_components=("1.10",),
    ),
    Question(
        question_id="Q5.2",
        category="Integration",
        text="How are your core systems integrated with each other?",
        answers=(
            Answer("Point-to-point interfaces built per project", 1, ("G013", "G016")),
            Answer("Nightly batch files between systems", 2, ("G015", "G016")),
            Answer("Central ESB or iPaaS, batch oriented", 3, ("G015", "G017")),
            Answer("iPaaS with APIs and some events", 4),
            Answer("Event-driven architecture with managed APIs", 5),
        ),
        affects_components=("4.2", "4.3", "4.4", "4.5", "4.9"),
        weight=3.0,
        is_required=True,
    ),
    Question(
        question_id="Q5.3",
        category="Integration",
        text="Do you operate an API management platform or gateway?",
        answers=(
            Answer("No API gateway", 1, ("G014", "G034")),
            Answer("Gateway for a few APIs, no portal", 2, ("G014", "G034")),
            Answer("Gateway with security policies, no versioning", 3, ("G041",)),
            Answer("Gateway with portal and versioning", 4),
            Answer("Full API lifecycle management with analytics", 5),
        ),
        affects_components=("2.10", "4.1", "4.2"),
        weight=1.5,
    ),
    Question(
        question_id="Q5.4",
        category="Integration",
        text="How often do integrations fail in production?",
        answers=(
            Answer("Weekly failures, found by users", 1, ("G013",)),
            Answer("Monthly failures, found by users", 2, ("G013",)),
            Answer("Occasional failures, caught by monitoring", 3),
            Answer("Rare failures with automatic retry", 4),
            Answer("Failures self-heal and are reported via SLOs", 5),
        ),
        affects_components=("4.10",),
    ),
    # -----------------------------------------------------------------------
    # Infrastructure & Cloud
    # -----------------------------------------------------------------------
    Question(
        question_id="Q6.1",
        category="Infrastructure & Cloud",
        text="Where do your workloads run today?",
        answers=(
            Answer("100% on-premises, no cloud strategy", 1, ("G018",)),
            Answer("Mostly on-premises with a few SaaS apps", 2, ("G018",)),
            Answer("Hybrid without cost management", 3, ("G040",)),
            Answer("Cloud-first with cost reporting", 4),
            Answer("Multi-cloud with FinOps practice", 5),
        ),
        affects_components=("5.1", "5.5", "5.6", "5.7", "5.9", "5.10"),
        weight=2.0,
        is_required=True,
    ),
    Question(
        question_id="Q6.2",
        category="Infrastructure & Cloud",
        text="How much do you use managed cloud platform services (PaaS, serverless)?",
        answers=(
            Answer("Not at all", 1, ("G018",)),
            Answer("Evaluated but not adopted", 2),
            Answer("Used for a few new applications", 3),
            Answer("Default for new workloads", 4),
            Answer("Platform engineering team offers paved roads", 5),
        ),
        affects_components=("5.1", "5.2", "5.4", "5.9"),
    ),
    Question(
        question_id="Q6.3",
        category="Infrastructure & Cloud",
        text="Do you use containers and container orchestration?",
        answers=(
            Answer("No containers", 1, ("G019",)),
            Answer("Containers on developer machines only", 2, ("G019",)),
            Answer("Containers in production without orchestration", 3),
            Answer("Managed Kubernetes for new services", 4),
            Answer("Kubernetes platform with service mesh and registry policies", 5),
        ),
        affects_components=("4.8", "5.3", "5.11", "7.3"),
    ),
    Question(
        question_id="Q6.4",
        category="Infrastructure & Cloud",
        text="How is infrastructure provisioned and configured?",
        answers=(
            Answer("Manually through consoles and tickets", 1, ("G020", "G029")),
            Answer("Scripts kept by individuals", 2, ("G020",)),
            Answer("Infrastructure as code for some environments", 3),
            Answer("Infrastructure as code for all environments", 4),
            Answer("GitOps with policy as code", 5),
        ),
        affects_components=("7.4", "7.5"),
        weight=1.5,
    ),
    Question(
        question_id="Q6.7",
        category="Infrastructure & Cloud",
        text="How mature is your backup and disaster recovery capability?",
        answers=(
            Answer("No disaster recovery plan", 1, ("G039",)),
            Answer("Backups exist but are never restored in a test", 2, ("G039",)),
            Answer("DR plan documented, tested occasionally", 3),
            Answer("DR tested annually against RTO and RPO targets", 4),
            Answer("Automated multi-region failover tested regularly", 5),
        ),
        affects_components=("5.8",),
        weight=2.0,
    ),
    # -----------------------------------------------------------------------
    # Security & Compliance
    # -----------------------------------------------------------------------
    Question(
        question_id="Q7.1",
        category="Security & Compliance",
        text="How do users authenticate to business systems?",
        answers=(
            Answer("Separate passwords per system, no MFA", 1, ("G024", "G022", "G021")),
            Answer("Central directory, MFA only for remote access", 2, ("G024", "G022")),
            Answer("SSO for most apps with MFA", 3, ("G021",)),
            Answer("SSO and MFA everywhere with conditional access", 4),
            Answer("Zero Trust with continuous verification", 5),
        ),
        affects_components=("6.1", "6.2", "8.9"),
        weight=3.0,
        is_required=True,
    ),
    Question(
        question_id="Q7.2",
        category="Security & Compliance",
        text="How would you describe your network, endpoint and cloud security controls?",
        answers=(
            Answer("Perimeter firewall and antivirus only", 1, ("G021",)),
            Answer("Perimeter controls plus basic endpoint protection", 2, ("G021",)),
            Answer("EDR and segmented network", 3),
            Answer("EDR, ZTNA and cloud posture management", 4),
            Answer("Integrated XDR with automated containment", 5),
        ),
        affects_components=("6.3", "6.4", "6.5", "6.6", "6.11"),
        weight=2.0,
    ),
    Question(
        question_id="Q7.3",
        category="Security & Compliance",
        text="How are security events collected and monitored?",
        answers=(
            Answer("No central logging or monitoring", 1, ("G025",)),
            Answer("Logs kept locally, reviewed after incidents", 2, ("G025",)),
            Answer("SIEM collects logs, monitored in business hours", 3),
            Answer("24x7 SOC with SIEM", 4),
            Answer("SOC with threat intelligence and SOAR playbooks", 5),
        ),
        affects_components=("6.8", "6.9"),
        weight=2.0,
    ),
    Question(
        question_id="Q7.4",
        category="Security & Compliance",
        text="How is encryption and key management handled?",
        answers=(
            Answer("No encryption strategy", 1, ("G026",)),
            Answer("TLS in transit only", 2, ("G026",)),
            Answer("Encryption at rest and in transit on key systems", 3),
            Answer("Centralised key management service", 4),
            Answer("Customer-managed keys with automated rotation", 5),
        ),
        affects_components=("6.7",),
    ),
    Question(
        question_id="Q7.5",
        category="Security & Compliance",
        text="How are vulnerabilities identified and remediated?",
        answers=(
            Answer("No vulnerability scanning", 1, ("G027",)),
            Answer("Annual penetration test only", 2, ("G027",)),
            Answer("Regular scanning, manual patching", 3),
            Answer("Continuous scanning with patch SLAs", 4),
            Answer("Risk-based prioritisation with automated remediation", 5),
        ),
        affects_components=("6.10",),
        weight=1.5,
    ),
    Question(
        question_id="Q7.6",
        category="Security & Compliance",
        text="How are privileged and administrator accounts controlled?",
        answers=(
            Answer("Shared admin passwords without MFA", 1, ("G023", "G024")),
            Answer("Named admin accounts, no session control", 2, ("G023",)),
            Answer("Password vault for admin credentials", 3),
            Answer("PAM with session recording", 4),
            Answer("Just-in-time privileged access with approvals", 5),
        ),
        affects_components=("0.6",),
        weight=1.5,
    ),
    # -----------------------------------------------------------------------
    # DevOps & Delivery
    # -----------------------------------------------------------------------
    Question(
        question_id="Q8.1",
        category="DevOps & Delivery",
        text="How are application changes deployed to production?",
        answers=(
            Answer("Manual deployments by operations staff", 1, ("G029", "G028")),
            Answer("Scripted but manually triggered deployments", 2, ("G029",)),
            Answer("CI builds with manual release approval", 3),
            Answer("Automated CI/CD to production", 4),
            Answer("Progressive delivery with automated rollback", 5),
        ),
        affects_components=("4.6", "7.2", "9.6"),
        weight=2.0,
    ),
    Question(
        question_id="Q8.2",
        category="DevOps & Delivery",
        text="How are delivery and testing practices organised?",
        answers=(
            Answer("Waterfall with manual testing", 1, ("G036", "G030")),
            Answer("Some agile teams, test coverage under 50%", 2, ("G036", "G030")),
            Answer("Agile teams with partial test automation", 3),
            Answer("Scaled agile with automated regression and security testing", 4),
            Answer("Continuous delivery with chaos and resilience testing", 5),
        ),
        affects_components=("6.13", "7.2", "7.11", "9.2", "9.5"),
        weight=1.5,
    ),
    Question(
        question_id="Q8.3",
        category="DevOps & Delivery",
        text="How is source code managed?",
        answers=(
            Answer("Shared folders or no version control", 1, ("G028",)),
            Answer("Version control without branch policies", 2, ("G028",)),
            Answer("Central Git with pull requests", 3),
            Answer("Git with protected branches and automated checks", 4),
            Answer("Trunk-based development with signed commits", 5),
        ),
        affects_components=("7.1",),
    ),
    Question(
        question_id="Q8.4",
        category="DevOps & Delivery",
        text="What monitoring and observability do you have for production systems?",
        answers=(
            Answer("None - users report outages", 1, ("G031",)),
            Answer("Infrastructure uptime checks only", 2, ("G031",)),
            Answer("APM on critical applications", 3),
            Answer("Metrics, logs and traces correlated", 4),
            Answer("Full-stack observability with AIOps", 5),
        ),
        affects_components=("7.6", "7.7", "7.8", "7.9"),
        weight=1.5,
    ),
    Question(
        question_id="Q8.5",
        category="DevOps & Delivery",
        text="How are production incidents and service levels managed?",
        answers=(
            Answer("No incident process or on-call", 1, ("G032",)),
            Answer("Best-effort response by whoever is available", 2, ("G032",)),
            Answer("On-call rotation with ticketing", 3),
            Answer("Incident management with post-incident reviews", 4),
            Answer("SLO-driven operations with error budgets", 5),
        ),
        affects_components=("7.10", "7.12"),
    ),
    # -----------------------------------------------------------------------
    # Pain Points
    # -----------------------------------------------------------------------
    Question(
        question_id="Q9.2",
        category="Pain Points",
        text="How much of financial planning and reporting still runs on spreadsheets?",
        answers=(
            Answer("Almost everything", 1, ("G004", "G009")),
            Answer("Budgeting and forecasting", 2, ("G004",)),
            Answer("Some management reporting", 3),
            Answer("Only ad-hoc analysis", 4),
            Answer("None - planning runs on an EPM platform", 5),
        ),
        affects_components=("1.2", "2.5"),
    ),
    Question(
        question_id="Q9.3",
        category="Pain Points",
        text="How are people prepared for new systems and process changes?",
        answers=(
            Answer("No change management or communication", 1, ("G037",)),
            Answer("Training at go-live only", 2, ("G037",)),
            Answer("Communication plan per project", 3),
            Answer("Structured change methodology (e.g. ADKAR)", 4),
            Answer("Adoption measured and continuously improved", 5),
        ),
        affects_components=("9.3",),
    ),
    Question(
        question_id="Q9.4",
        category="Pain Points",
        text="How are data migrations handled in transformation projects?",
        answers=(
            Answer("Manual extracts and re-keying", 1, ("G016", "G038")),
            Answer("One-off scripts per project", 2, ("G016",)),
            Answer("ETL tooling with reconciliation", 3),
            Answer("Repeatable migration factory", 4),
            Answer("Automated, tested migration pipelines", 5),
        ),
        affects_components=("3.6", "9.4"),
    ),
    Question(
        question_id="Q9.5",
        category="Pain Points",
        text="How are systems stabilised after go-live?",
        answers=(
            Answer("Project team disbands at go-live", 1, ("G032",)),
            Answer("Informal support from the project team", 2),
            Answer("Planned hypercare period", 3),
            Answer("Hypercare with exit criteria and handover", 4),
            Answer("Hypercare metrics feed benefits realisation", 5),
        ),
        affects_components=("9.7",),
    ),
)

# Convenience mappings for fast lookup
QUESTIONS_BY_ID: dict[str, Question] = {q.question_id: q for q in QUESTION_BANK}

QUESTIONS_BY_CATEGORY: dict[str, list[Question]] = {}
for _question in QUESTION_BANK:
    QUESTIONS_BY_CATEGORY.setdefault(_question.category, []).append(_question)

ALL_CATEGORIES: list[str] = list(QUESTION_CATEGORIES)
