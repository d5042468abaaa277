"""Enterprise Architecture layer/component taxonomy.

Ten layers (0-9) and 109 components, modelled on TOGAF 10 and ArchiMate 3.2.
Component ids ('3.4', '6.12', ...) are stable keys used by the question bank,
the gap rule catalog and every consumer of the maturity summary, so neither
the ids nor the counts may change.

Each component lists the question ids that score it. The same relationship is
declared from the question side via ``Question.affects_components``.
"""

from ea_assessment.core.models import Component, Layer

EA_LAYERS: tuple[Layer, ...] = (
    Layer(
        layer_id=0,
        name="Strategy & Motivation",
        description="Why we do what we do; strategic goals, regulatory drivers, value streams",
        components=(
            Component(
                "0.1",
                "Business Strategy & Goals",
                (
                    "Define strategic objectives, growth targets, competitive "
                    "positioning"
                ),
                ("Q2.1", "Q2.3"),
            ),
            Component(
                "0.2",
                "Stakeholder Requirements",
                (
                    "Capture needs from customers, regulators, shareholders, "
                    "employees"
                ),
                ("Q2.1",),
            ),
            Component(
                "0.3",
                "Drivers & Constraints",
                (
                    "Regulatory mandates, market forces, budget limits, technical "
                    "debt"
                ),
                ("Q2.2", "Q2.4"),
            ),
            Component(
                "0.4",
                "Value Streams",
                "End-to-end flows that deliver customer/stakeholder value",
                ("Q2.1",),
            ),
            Component(
                "0.5",
                "Architecture Principles",
                (
                    "Guiding rules (Cloud First, API First, Security by Design, Buy "
                    "Before Build)"
                ),
                ("Q2.3",),
            ),
            Component(
                "0.6",
                "Risk Assessment",
                "Strategic risks and mitigations",
                ("Q2.2", "Q7.6"),
            ),
            Component(
                "0.7",
                "Innovation Roadmap",
                "Future-oriented initiatives (AI/ML, IoT, blockchain)",
                ("Q2.1", "Q2.4"),
            ),
            Component(
                "0.8",
                "Sustainability Goals (ESG)",
                "Environmental, social, governance considerations",
                ("Q2.1", "Q2.2"),
            ),
            Component(
                "0.9",
                "Standards & Roadmaps",
                "Prescribed technologies and future state plans",
                ("Q2.3", "Q3.4"),
            ),
            Component(
                "0.10",
                "Portfolio Management",
                "Prioritizing initiatives, resource allocation",
                ("Q2.1", "Q2.3"),
            ),
        ),
    ),
    Layer(
        layer_id=1,
        name="Business Architecture",
        description="What the business does; capabilities, processes, org structure",
        components=(
            Component(
                "1.1",
                "Business Capabilities",
                "What the business does (Finance, HR, Sales, Operations)",
                ("Q1.3",),
            ),
            Component(
                "1.2",
                "Business Processes (BPMN)",
                (
                    "How work gets done (Order-to-Cash, Procure-to-Pay, "
                    "Hire-to-Retire)"
                ),
                ("Q9.2",),
            ),
            Component(
                "1.3",
                "Organisational Structure",
                "Divisions, departments, roles, reporting lines",
                ("Q1.2",),
            ),
            Component(
                "1.4",
                "Products & Services",
                "What the business sells or delivers",
                ("Q1.3",),
            ),
            Component(
                "1.5",
                "Information Concepts (Business Data)",
                (
                    "Business entities (Customer, Order, Asset) before technical "
                    "implementation"
                ),
                ("Q4.2",),
            ),
            Component(
                "1.6",
                "Business Events & Policies",
                "Triggers and rules that govern business decisions",
                ("Q2.2",),
            ),
            Component(
                "1.7",
                "Customer Journeys & Personas",
                "Experience mapping from awareness to post-purchase",
                ("Q2.1",),
            ),
            Component(
                "1.8",
                "Performance Metrics (KPIs)",
                "Measure business performance",
                ("Q2.1", "Q4.3"),
            ),
            Component(
                "1.9",
                "Contracts & Agreements",
                "Formal agreements with stakeholders",
                ("Q3.7",),
            ),
            Component(
                "1.10",
                "Collaboration & Partner Ecosystems",
                "B2B touchpoints, partner portals",
                ("Q5.1",),
            ),
        ),
    ),
    Layer(
        layer_id=2,
        name="Application & Services",
        description="Systems that run the business; ERP, CRM, HCM, industry apps",
        components=(
            Component(
                "2.1",
                "ERP (Enterprise Resource Planning)",
                (
                    "Core transactional systems for finance, HR, procurement, "
                    "manufacturing"
                ),
                ("Q3.1",),
            ),
            Component(
                "2.2",
                "CRM (Customer Relationship Management)",
                "Sales, marketing, service management; 360° customer view",
                ("Q3.2",),
            ),
            Component(
                "2.3",
                "HCM / Workforce Management",
                "Payroll, talent, recruitment, learning, time & attendance",
                ("Q3.3",),
            ),
            Component(
                "2.4",
                "Supply Chain & Logistics",
                "Planning, procurement, warehousing, transport, inventory",
                ("Q1.3",),
            ),
            Component(
                "2.5",
                "Finance & Accounting",
                "GL, AP, AR, tax, financial reporting, consolidation",
                ("Q3.1", "Q9.2"),
            ),
            Component(
                "2.6",
                "Industry-Specific Applications",
                "Vertical solutions for mining, healthcare, retail, finance",
                ("Q1.3", "Q3.7"),
            ),
            Component(
                "2.7",
                "Collaboration & Productivity",
                "Email, document management, intranet, teams",
                ("Q3.4",),
            ),
            Component(
                "2.8",
                "Point Solutions & SaaS Tools",
                "Niche apps (expense, travel, procurement cards, eSignature)",
                ("Q3.4",),
            ),
            Component(
                "2.9",
                "Custom-Built Applications",
                "Bespoke systems for unique business processes",
                ("Q3.5", "Q3.8"),
            ),
            Component(
                "2.10",
                "Application Services (APIs, Microservices)",
                "Composable services exposing business logic via REST/GraphQL",
                ("Q3.9", "Q5.3"),
            ),
        ),
    ),
    Layer(
        layer_id=3,
        name="Data & Analytics",
        description="How we store, govern, move, and analyze data; MDM, warehouses, BI, ML",
        components=(
            Component(
                "3.1",
                "Master Data Management (MDM)",
                "Golden records for customers, products, suppliers, assets",
                ("Q4.2",),
            ),
            Component(
                "3.2",
                "Data Warehousing (Traditional)",
                "Structured, dimensional models for historical BI",
                ("Q4.1",),
            ),
            Component(
                "3.3",
                "Cloud Data Warehouses",
                "Elastic, SQL-based analytics storage",
                ("Q4.1",),
            ),
            Component(
                "3.4",
                "Data Lakes",
                "Store raw/semi-structured data at scale (logs, IoT, media)",
                ("Q4.1",),
            ),
            Component(
                "3.5",
                "Data Catalogues & Governance",
                "Metadata management, lineage, data discovery, glossaries",
                ("Q4.2",),
            ),
            Component(
                "3.6",
                "ETL / ELT Pipelines",
                "Extract, transform, load data between systems",
                ("Q4.1", "Q9.4"),
            ),
            Component(
                "3.7",
                "Real-Time Streaming & Event Processing",
                (
                    "Ingest and process data in motion (IoT, clickstreams, "
                    "transactions)"
                ),
                ("Q4.1",),
            ),
            Component(
                "3.8",
                "Business Intelligence (BI) Platforms",
                "Reporting, dashboards, self-service analytics",
                ("Q4.3",),
            ),
            Component(
                "3.9",
                "Machine Learning (ML) Platforms",
                "Data science, predictive models, AutoML, model deployment",
                ("Q4.4",),
            ),
            Component(
                "3.10",
                "Operational Analytics (Embedded)",
                "Dashboards inside operational apps",
                ("Q4.3",),
            ),
            Component(
                "3.11",
                "Data Quality & Profiling",
                "Detect duplicates, validate formats, measure completeness",
                ("Q4.5",),
            ),
            Component(
                "3.12",
                "Data Privacy & Compliance",
                (
                    "GDPR consent, data retention, right to be forgotten, audit "
                    "trails"
                ),
                ("Q2.2", "Q4.6"),
            ),
            Component(
                "3.13",
                "Data Lakehouse",
                "Combines lake scalability with warehouse ACID transactions",
                ("Q4.1",),
            ),
        ),
    ),
    Layer(
        layer_id=4,
        name="Integration & Middleware",
        description="Glue between systems; APIs, ESBs, messaging, orchestration",
        components=(
            Component(
                "4.1",
                "API Management / Gateway",
                (
                    "Publish, secure, throttle, monitor APIs; centralised policy "
                    "enforcement"
                ),
                ("Q5.3",),
            ),
            Component(
                "4.2",
                "Enterprise Service Bus (ESB) / iPaaS",
                (
                    "Centralised messaging and integration hub; orchestrate complex "
                    "flows"
                ),
                ("Q5.2", "Q5.3"),
            ),
            Component(
                "4.3",
                "Message Broker / Queue",
                "Asynchronous messaging, guaranteed delivery, decoupling",
                ("Q5.2",),
            ),
            Component(
                "4.4",
                "Event Streaming Platform",
                "Real-time event backbone, publish-subscribe at scale",
                ("Q5.2",),
            ),
            Component(
                "4.5",
                "File Transfer (MFT/SFTP)",
                "Secure bulk file exchange (EDI, bank files, payroll)",
                ("Q5.2",),
            ),
            Component(
                "4.6",
                "RPA (Robotic Process Automation)",
                "Automate UI-based tasks where APIs not available",
                ("Q8.1",),
            ),
            Component(
                "4.7",
                "API Development & Mocking",
                "Design-first APIs, testing, documentation",
                ("Q3.9",),
            ),
            Component(
                "4.8",
                "Service Mesh",
                "Service-to-service comms, observability, circuit breakers",
                ("Q6.3",),
            ),
            Component(
                "4.9",
                "EDI / B2B Integration",
                "Standards-based document exchange (X12, EDIFACT, HL7, FHIR)",
                ("Q5.2",),
            ),
            Component(
                "4.10",
                "Integration Failure Rate",
                "Monitoring and alerting on integration health",
                ("Q5.4",),
            ),
        ),
    ),
    Layer(
        layer_id=5,
        name="Platform & Infrastructure",
        description="Where apps and data run; cloud, on-prem, containers, databases",
        components=(
            Component(
                "5.1",
                "Cloud IaaS (Infrastructure-as-a-Service)",
                "Virtual machines, block storage, virtual networks",
                ("Q6.1", "Q6.2"),
            ),
            Component(
                "5.2",
                "Cloud PaaS (Platform-as-a-Service)",
                "Managed app hosting (no OS management), auto-scaling",
                ("Q6.2",),
            ),
            Component(
                "5.3",
                "Container Orchestration (Kubernetes)",
                (
                    "Run microservices at scale, declarative deployments, "
                    "self-healing"
                ),
                ("Q6.3",),
            ),
            Component(
                "5.4",
                "Serverless / FaaS",
                (
                    "Event-driven code execution, no server management, "
                    "pay-per-invocation"
                ),
                ("Q6.2",),
            ),
            Component(
                "5.5",
                "Storage (Block, File, Object)",
                "Persistent storage for apps, backups, archives",
                ("Q6.1",),
            ),
            Component(
                "5.6",
                "Database-as-a-Service (DBaaS)",
                "Managed relational/NoSQL databases, automated backups, HA",
                ("Q6.1",),
            ),
            Component(
                "5.7",
                "Network (Load Balancer, CDN, VPN, DNS)",
                (
                    "Connectivity, traffic routing, DDoS protection, content "
                    "delivery"
                ),
                ("Q6.1",),
            ),
            Component(
                "5.8",
                "Backup & Disaster Recovery (DR)",
                "Protect against data loss, meet RTO/RPO requirements",
                ("Q6.7",),
            ),
            Component(
                "5.9",
                "Hybrid Cloud / Multi-Cloud",
                "Run workloads across on-prem + multiple cloud providers",
                ("Q6.1", "Q6.2"),
            ),
            Component(
                "5.10",
                "On-Premises Datacentre",
                "Owned/leased servers, storage arrays, network equipment",
                ("Q6.1",),
            ),
            Component(
                "5.11",
                "Edge Computing",
                (
                    "Process data near the source (IoT gateways, retail stores, "
                    "remote sites)"
                ),
                ("Q6.3",),
            ),
        ),
    ),
    Layer(
        layer_id=6,
        name="Security, Identity & Governance",
        description="Who can do what, and how we stay safe; IAM, encryption, SIEM, GRC",
        components=(
            Component(
                "6.1",
                "Identity & Access Management (IAM)",
                (
                    "Centralised user authentication, SSO, MFA, lifecycle "
                    "(joiner/mover/leaver)"
                ),
                ("Q7.1",),
            ),
            Component(
                "6.2",
                "Privileged Access Management (PAM)",
                (
                    "Control/monitor admin access, session recording, just-in-time "
                    "elevation"
                ),
                ("Q7.1",),
            ),
            Component(
                "6.3",
                "Endpoint Security (EDR/XDR)",
                (
                    "Detect/respond to threats on laptops, servers (malware, "
                    "ransomware)"
                ),
                ("Q7.2",),
            ),
            Component(
                "6.4",
                "Network Security (Firewall, IDS/IPS, ZTNA)",
                "Segment networks, block malicious traffic, zero trust access",
                ("Q7.2",),
            ),
            Component(
                "6.5",
                "Email & Web Security",
                "Block phishing, malware, data exfiltration via email/web",
                ("Q7.2",),
            ),
            Component(
                "6.6",
                "Data Loss Prevention (DLP)",
                (
                    "Prevent sensitive data (credit cards, health records) leaving "
                    "the organisation"
                ),
                ("Q7.2",),
            ),
            Component(
                "6.7",
                "Encryption (At-Rest, In-Transit, Key Management)",
                "Protect data confidentiality, meet compliance",
                ("Q7.4",),
            ),
            Component(
                "6.8",
                "Security Information & Event Management (SIEM)",
                (
                    "Aggregate logs, correlate events, detect threats, compliance "
                    "reporting"
                ),
                ("Q7.3",),
            ),
            Component(
                "6.9",
                "Threat Intelligence & SOAR",
                "Automate incident response, enrich alerts with threat intel",
                ("Q7.3",),
            ),
            Component(
                "6.10",
                "Vulnerability Management",
                "Scan for CVEs, misconfigurations, prioritize patching",
                ("Q7.5",),
            ),
            Component(
                "6.11",
                "Cloud Security Posture Management (CSPM)",
                (
                    "Detect cloud misconfigurations (open S3 buckets, weak IAM "
                    "policies)"
                ),
                ("Q7.2",),
            ),
            Component(
                "6.12",
                "Governance, Risk & Compliance (GRC)",
                (
                    "Policy management, audit readiness, risk register, "
                    "attestations"
                ),
                ("Q2.2",),
            ),
            Component(
                "6.13",
                "Application Security (SAST, DAST, SCA)",
                "Find vulnerabilities in code before production",
                ("Q8.2",),
            ),
            Component(
                "6.14",
                "Compliance (Australian-Specific)",
                "ACSC Essential Eight, Privacy Act, Fair Work Act",
                ("Q2.2",),
            ),
        ),
    ),
    Layer(
        layer_id=7,
        name="DevOps, CI/CD & Observability",
        description="How we build, deploy, monitor code; source control, pipelines, APM",
        components=(
            Component(
                "7.1",
                "Source Control & Version Management",
                "Track code changes, branching, pull requests, code reviews",
                ("Q8.3",),
            ),
            Component(
                "7.2",
                "CI/CD (Continuous Integration/Deployment)",
                "Automate build, test, deploy; fast feedback loops",
                ("Q8.1", "Q8.2"),
            ),
            Component(
                "7.3",
                "Artifact & Container Registries",
                "Store build outputs (JARs, Docker images, Helm charts)",
                ("Q6.3",),
            ),
            Component(
                "7.4",
                "Infrastructure-as-Code (IaC)",
                (
                    "Define infra declaratively (version control, repeatability, "
                    "DR)"
                ),
                ("Q6.4",),
            ),
            Component(
                "7.5",
                "Configuration Management",
                "Install software, configure OS, enforce desired state",
                ("Q6.4",),
            ),
            Component(
                "7.6",
                "Application Performance Monitoring (APM)",
                "Trace requests end-to-end, identify slow queries, profiling",
                ("Q8.4",),
            ),
            Component(
                "7.7",
                "Logging & Log Aggregation",
                "Centralise logs from all systems, search/filter, retention",
                ("Q8.4",),
            ),
            Component(
                "7.8",
                "Metrics & Time-Series Databases",
                (
                    "Collect numeric metrics (CPU, memory, request rate), visualize "
                    "trends"
                ),
                ("Q8.4",),
            ),
            Component(
                "7.9",
                "Distributed Tracing",
                (
                    "Track a single request across microservices, identify latency"
                ),
                ("Q8.4",),
            ),
            Component(
                "7.10",
                "Incident Management & On-Call",
                "Alert routing, escalation, post-incident reviews",
                ("Q8.5",),
            ),
            Component(
                "7.11",
                "Chaos Engineering & Resilience Testing",
                "Inject failures to test system robustness",
                ("Q8.2",),
            ),
            Component(
                "7.12",
                "Service Level Management (SLI/SLO/SLA)",
                (
                    "Define reliability targets, error budgets, track availability"
                ),
                ("Q8.5",),
            ),
        ),
    ),
    Layer(
        layer_id=8,
        name="UX & Presentation",
        description="How users interact; web portals, mobile apps, dashboards",
        components=(
            Component(
                "8.1",
                "Web Portals & Customer Interfaces",
                "Public-facing or customer self-service sites",
                ("Q2.1",),
            ),
            Component(
                "8.2",
                "Mobile Applications (Native & Cross-Platform)",
                "iOS/Android apps for customers or workforce",
                ("Q2.1",),
            ),
            Component(
                "8.3",
                "Progressive Web Apps (PWA)",
                "Web apps with native-like experience (offline, push)",
                ("Q2.1",),
            ),
            Component(
                "8.4",
                "Dashboards & Embedded Analytics",
                "Visualizations embedded in apps",
                ("Q4.3",),
            ),
            Component(
                "8.5",
                "Design Systems & Component Libraries",
                "Consistent UI patterns, accessibility compliance",
                (),
            ),
            Component(
                "8.6",
                "Accessibility & Compliance",
                "WCAG 2.1 AA/AAA, screen reader support, keyboard nav",
                (),
            ),
            Component(
                "8.7",
                "Personalisation & A/B Testing",
                "Dynamic content, experimentation, optimization",
                ("Q2.1",),
            ),
            Component(
                "8.8",
                "Digital Experience Platform (DXP)",
                "Manages content and user journeys",
                ("Q2.1",),
            ),
            Component(
                "8.9",
                "Single Sign-On (SSO) User Experience",
                "Provides unified authentication experience",
                ("Q7.1",),
            ),
        ),
    ),
    Layer(
        layer_id=9,
        name="Implementation & Migration",
        description="How we deliver change; program management, agile, testing, cutover",
        components=(
            Component(
                "9.1",
                "Program & Portfolio Management",
                (
                    "Track initiatives, dependencies, budgets, benefits realization"
                ),
                ("Q2.3",),
            ),
            Component(
                "9.2",
                "Agile Delivery & Scrum/Kanban",
                "Iterative development, sprint planning, retrospectives",
                ("Q8.2",),
            ),
            Component(
                "9.3",
                "Change Management & Training",
                "Stakeholder engagement, comms, training materials, adoption",
                ("Q9.3",),
            ),
            Component(
                "9.4",
                "Data Migration & Cutover",
                (
                    "Extract, transform, validate, load legacy data; go-live "
                    "planning"
                ),
                ("Q9.4",),
            ),
            Component(
                "9.5",
                "Testing & Quality Assurance",
                "Functional, performance, security, UAT",
                ("Q8.2",),
            ),
            Component(
                "9.6",
                "Deployment & Cutover Management",
                "Go-live orchestration, rollback procedures, hypercare",
                ("Q8.1",),
            ),
            Component(
                "9.7",
                "Hypercare & Stabilisation",
                "Post-go-live support, defect triage, user support, tuning",
                ("Q9.5",),
            ),
            Component(
                "9.8",
                "Architecture Plateau",
                (
                    "A stable, temporary state of the architecture during a "
                    "transition"
                ),
                (),
            ),
            Component(
                "9.9",
                "Migration Factories",
                "Structured teams for executing bulk transitions",
                (),
            ),
            Component(
                "9.10",
                "Benefits Realisation",
                (
                    "Track if expected benefits achieved (cost savings, "
                    "productivity, revenue)"
                ),
                ("Q2.1",),
            ),
        ),
    ),
)

LAYERS_BY_ID: dict[int, Layer] = {layer.layer_id: layer for layer in EA_LAYERS}

LAYER_NAMES: dict[int, str] = {layer.layer_id: layer.name for layer in EA_LAYERS}

COMPONENTS_BY_ID: dict[str, Component] = {
    component.component_id: component
    for layer in EA_LAYERS
    for component in layer.components
}

_LAYER_BY_COMPONENT_ID: dict[str, int] = {
    component.component_id: layer.layer_id
    for layer in EA_LAYERS
    for component in layer.components
}

TOTAL_LAYERS: int = len(EA_LAYERS)
TOTAL_COMPONENTS: int = len(COMPONENTS_BY_ID)


def get_layer_for_component(component_id: str) -> int | None:
    """Return the id of the layer owning a component, or None if unknown."""
    return _LAYER_BY_COMPONENT_ID.get(component_id)
