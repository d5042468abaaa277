"""Enterprise Architecture gap rule catalog.

Each rule describes a missing or weak capability, where it sits in the
taxonomy, and how it scores on risk, business impact and remediation cost.
Answers in the question bank raise rules by id. Priority is always derived:

    priority_score = (risk x business_impact) / remediation_cost

Catalog ranges:
    G001-G010  strategic, business and application gaps
    G011-G020  data, integration and platform gaps
    G021-G030  security and delivery gaps
    G031-G041  observability, UX, implementation and resilience gaps
"""

from ea_assessment.core.models import GapRule, PriorityBand, Recommendation

GAP_RULES: tuple[GapRule, ...] = (
    GapRule(
        gap_id="G001",
        description="No documented EA strategy or framework",
        layer=0,
        component_id="0.1",
        risk=5,
        business_impact=5,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Establish Enterprise Architecture Framework",
            description=(
                "Implement TOGAF 10 or Zachman framework with governance model, "
                "architecture board, and decision-making processes. This creates "
                "alignment between IT and business strategy."
            ),
            suggested_vendors=("LeanIX", "Ardoq", "Bizzdesign", "Avolution ABACUS"),
            timeline="3-6 months",
            estimated_cost="$50K-$150K (consulting + EA tool)",
            expected_roi=(
                "300% over 3 years through reduced tech debt, better "
                "decision-making, and avoided duplicate spend"
            ),
        ),
    ),
    GapRule(
        gap_id="G002",
        description="No technology roadmap or architectural vision",
        layer=0,
        component_id="0.2",
        risk=4,
        business_impact=5,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Develop 3-Year Technology Roadmap",
            description=(
                "Create a phased transformation roadmap with migration paths from "
                "legacy to modern platforms, including cloud strategy, API-first "
                "architecture, and modernization priorities."
            ),
            suggested_vendors=(
                "Gartner Advisory",
                "Forrester Consulting",
                "McKinsey Digital",
            ),
            timeline="2-4 months",
            estimated_cost="$75K-$200K",
            expected_roi=(
                "250% by preventing costly rework and enabling strategic "
                "technology investments"
            ),
        ),
    ),
    GapRule(
        gap_id="G003",
        description="Legacy ERP approaching end-of-life (SAP ECC 2027)",
        layer=2,
        component_id="2.1",
        risk=5,
        business_impact=5,
        remediation_cost=5,
        recommendation=Recommendation(
            title="Migrate to SAP S/4HANA or Cloud ERP Alternative",
            description=(
                "SAP ECC support ends in 2027. Migrate to S/4HANA (cloud or "
                "on-prem) or consider alternatives like Oracle Fusion Cloud, "
                "Microsoft Dynamics 365, or Workday. Greenfield approach "
                "recommended over brownfield conversion."
            ),
            suggested_vendors=(
                "SAP S/4HANA",
                "Oracle Fusion Cloud ERP",
                "Microsoft Dynamics 365",
                "Workday",
            ),
            timeline="18-36 months",
            estimated_cost="$2M-$10M+ (depending on size)",
            expected_roi=(
                "150% over 5 years through process automation, real-time "
                "insights, and reduced TCO"
            ),
        ),
    ),
    GapRule(
        gap_id="G004",
        description="Spreadsheet-based financial planning (no EPM)",
        layer=2,
        component_id="2.5",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Enterprise Performance Management (EPM) Platform",
            description=(
                "Replace spreadsheets with cloud EPM for budgeting, forecasting, "
                "consolidation, and reporting. Enables real-time driver-based "
                "planning and scenario modeling."
            ),
            suggested_vendors=(
                "Anaplan",
                "OneStream",
                "Oracle EPM Cloud",
                "Workday Adaptive Planning",
                "IBM Planning Analytics",
            ),
            timeline="6-12 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "400% through faster close cycles (15 → 5 days), improved "
                "forecast accuracy, and reduced FTE effort"
            ),
        ),
    ),
    GapRule(
        gap_id="G005",
        description="No ERP system - relying on spreadsheets",
        layer=2,
        component_id="2.1",
        risk=5,
        business_impact=5,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Modern Cloud ERP",
            description=(
                "Critical gap - implement cloud-native ERP to establish single "
                "source of truth for finance, procurement, HR, and operations. "
                "Start with core modules and expand."
            ),
            suggested_vendors=(
                "NetSuite",
                "Microsoft Dynamics 365 Business Central",
                "SAP Business ByDesign",
                "Acumatica",
                "Workday",
            ),
            timeline="9-18 months",
            estimated_cost="$500K-$3M",
            expected_roi=(
                "200% through process automation, improved controls, real-time "
                "visibility, and scalability"
            ),
        ),
    ),
    GapRule(
        gap_id="G006",
        description="CRM with >15% duplicate records or no CRM",
        layer=2,
        component_id="2.2",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="CRM Data Quality Improvement & Master Data Management",
            description=(
                "Implement data quality tools, deduplication processes, and MDM "
                "governance. If no CRM exists, implement cloud CRM with strong "
                "data governance from day one."
            ),
            suggested_vendors=(
                "Salesforce Data Cloud",
                "Microsoft Dynamics 365",
                "HubSpot",
                "Informatica MDM",
                "Reltio",
            ),
            timeline="4-9 months",
            estimated_cost="$150K-$600K",
            expected_roi=(
                "350% through improved sales productivity, better customer "
                "insights, and reduced marketing waste"
            ),
        ),
    ),
    GapRule(
        gap_id="G007",
        description="No data warehouse or data lake",
        layer=3,
        component_id="3.1",
        risk=4,
        business_impact=5,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Modern Cloud Data Platform",
            description=(
                "Build cloud data warehouse (Snowflake, BigQuery, Redshift) or "
                "data lakehouse (Databricks) as central analytics platform. "
                "Enables self-service BI and advanced analytics."
            ),
            suggested_vendors=(
                "Snowflake",
                "Databricks",
                "Google BigQuery",
                "Amazon Redshift",
                "Microsoft Synapse",
            ),
            timeline="6-12 months",
            estimated_cost="$300K-$1.5M",
            expected_roi=(
                "250% through faster insights, reduced report development time, "
                "and data-driven decision making"
            ),
        ),
    ),
    GapRule(
        gap_id="G008",
        description="No Master Data Management (MDM)",
        layer=3,
        component_id="3.2",
        risk=4,
        business_impact=4,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Master Data Management Program",
            description=(
                "Establish MDM for customer, product, vendor, and location data. "
                "Creates single source of truth across all systems with data "
                "governance and quality rules."
            ),
            suggested_vendors=(
                "Informatica MDM",
                "SAP Master Data Governance",
                "Profisee",
                "Semarchy xDM",
                "Reltio",
            ),
            timeline="9-18 months",
            estimated_cost="$400K-$2M",
            expected_roi=(
                "200% through improved data quality, reduced duplicate spend, "
                "better compliance, and analytics accuracy"
            ),
        ),
    ),
    GapRule(
        gap_id="G009",
        description="Spreadsheet-based reporting (no BI platform)",
        layer=3,
        component_id="3.4",
        risk=3,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Self-Service BI Platform",
            description=(
                "Deploy cloud BI tool (Power BI, Tableau, Looker) with semantic "
                "layer, governed data models, and self-service capabilities. "
                "Reduces report backlog and empowers business users."
            ),
            suggested_vendors=(
                "Microsoft Power BI",
                "Tableau",
                "Looker",
                "Qlik Sense",
                "Thoughtspot",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "400% through reduced IT report development time (80% reduction), "
                "faster insights, and improved decision quality"
            ),
        ),
    ),
    GapRule(
        gap_id="G010",
        description="No data governance or data quality program",
        layer=3,
        component_id="3.3",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Establish Data Governance Framework",
            description=(
                "Implement data governance program with data stewards, quality "
                "KPIs, lineage tracking, and metadata management. Critical for "
                "compliance (GDPR, CCPA) and analytics trust."
            ),
            suggested_vendors=(
                "Collibra",
                "Alation",
                "Informatica Axon",
                "Microsoft Purview",
                "Atlan",
            ),
            timeline="6-12 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "300% through reduced compliance risk, improved analytics "
                "accuracy, and faster data discovery"
            ),
        ),
    ),
    GapRule(
        gap_id="G011",
        description="No predictive analytics or AI/ML capabilities",
        layer=3,
        component_id="3.5",
        risk=3,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Build AI/ML Analytics Platform",
            description=(
                "Implement ML platform (Databricks, AWS SageMaker, Azure ML) for "
                "predictive models, demand forecasting, customer churn, and "
                "process optimization. Start with high-value use cases."
            ),
            suggested_vendors=(
                "Databricks",
                "AWS SageMaker",
                "Azure Machine Learning",
                "Google Vertex AI",
                "DataRobot",
            ),
            timeline="6-12 months",
            estimated_cost="$300K-$1.2M",
            expected_roi=(
                "250% through improved forecast accuracy (+20-30%), optimized "
                "pricing, and proactive issue detection"
            ),
        ),
    ),
    GapRule(
        gap_id="G012",
        description="No real-time analytics or streaming data",
        layer=3,
        component_id="3.6",
        risk=3,
        business_impact=3,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Real-Time Data Streaming Platform",
            description=(
                "Deploy event streaming platform (Kafka, Kinesis, Pub/Sub) for "
                "real-time analytics, fraud detection, and operational "
                "dashboards. Enables sub-second decision-making."
            ),
            suggested_vendors=(
                "Confluent (Kafka)",
                "AWS Kinesis",
                "Google Pub/Sub",
                "Azure Event Hubs",
                "Databricks Delta Live Tables",
            ),
            timeline="4-8 months",
            estimated_cost="$200K-$700K",
            expected_roi=(
                "200% through real-time fraud prevention, dynamic pricing, and "
                "operational efficiency"
            ),
        ),
    ),
    GapRule(
        gap_id="G013",
        description="Point-to-point integrations (spaghetti)",
        layer=4,
        component_id="4.1",
        risk=5,
        business_impact=4,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Enterprise Integration Platform (iPaaS)",
            description=(
                "Replace point-to-point integrations with centralized integration "
                "platform (MuleSoft, Boomi, Workato). Reduces complexity from "
                "N×(N-1) to 2N connections."
            ),
            suggested_vendors=(
                "MuleSoft Anypoint",
                "Boomi",
                "Workato",
                "Informatica IICS",
                "Snaplogic",
            ),
            timeline="9-18 months",
            estimated_cost="$400K-$2M",
            expected_roi=(
                "300% through 70% faster integration development, reduced "
                "maintenance cost, and improved reliability"
            ),
        ),
    ),
    GapRule(
        gap_id="G014",
        description="No API management or API gateway",
        layer=4,
        component_id="4.2",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Deploy API Management Platform",
            description=(
                "Implement API gateway for authentication, rate limiting, "
                "versioning, and analytics. Enables API-first architecture and "
                "secure partner/mobile integrations."
            ),
            suggested_vendors=(
                "Apigee",
                "Kong",
                "AWS API Gateway",
                "Azure API Management",
                "MuleSoft Anypoint",
            ),
            timeline="3-6 months",
            estimated_cost="$150K-$600K",
            expected_roi=(
                "250% through faster partner onboarding, improved security, and "
                "reduced integration time (50%)"
            ),
        ),
    ),
    GapRule(
        gap_id="G015",
        description="Batch-only integration (no real-time)",
        layer=4,
        component_id="4.3",
        risk=3,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Enable Real-Time Integration Capabilities",
            description=(
                "Implement event-driven architecture with API-based real-time "
                "integrations and webhooks. Critical for customer experience, "
                "inventory accuracy, and fraud prevention."
            ),
            suggested_vendors=(
                "MuleSoft",
                "Confluent Platform",
                "AWS EventBridge",
                "Azure Logic Apps",
                "Workato",
            ),
            timeline="4-8 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "200% through improved customer experience, reduced stockouts, "
                "and real-time decision-making"
            ),
        ),
    ),
    GapRule(
        gap_id="G016",
        description="No ETL/ELT tool or pipeline automation",
        layer=4,
        component_id="4.4",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Modern Data Integration Platform",
            description=(
                "Deploy cloud ETL/ELT platform (Fivetran, Matillion, Talend "
                "Cloud) for automated data pipelines with monitoring, error "
                "handling, and lineage tracking."
            ),
            suggested_vendors=(
                "Fivetran",
                "Matillion",
                "Talend Cloud",
                "AWS Glue",
                "Azure Data Factory",
                "Informatica IICS",
            ),
            timeline="3-6 months",
            estimated_cost="$150K-$500K",
            expected_roi=(
                "350% through 80% faster pipeline development, reduced errors, "
                "and self-service data access"
            ),
        ),
    ),
    GapRule(
        gap_id="G017",
        description="No ESB or event-driven architecture",
        layer=4,
        component_id="4.5",
        risk=3,
        business_impact=3,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Event-Driven Architecture",
            description=(
                "Deploy modern event bus (Kafka, AWS EventBridge, Azure Event "
                "Grid) for decoupled, scalable, real-time integrations. Replaces "
                "legacy ESB with cloud-native approach."
            ),
            suggested_vendors=(
                "Confluent",
                "AWS EventBridge",
                "Azure Event Grid",
                "Google Pub/Sub",
                "Solace",
            ),
            timeline="6-12 months",
            estimated_cost="$300K-$1M",
            expected_roi=(
                "200% through improved system resilience, faster feature "
                "delivery, and real-time capabilities"
            ),
        ),
    ),
    GapRule(
        gap_id="G018",
        description="No cloud strategy or still 100% on-premises",
        layer=5,
        component_id="5.1",
        risk=4,
        business_impact=5,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Develop Cloud Migration Strategy",
            description=(
                "Create phased cloud migration plan starting with non-critical "
                "workloads. Recommend hybrid approach with mission-critical apps "
                "on cloud IaaS/PaaS and SaaS for standard functions."
            ),
            suggested_vendors=(
                "AWS",
                "Microsoft Azure",
                "Google Cloud Platform",
                "Oracle Cloud",
            ),
            timeline="12-36 months (phased)",
            estimated_cost="$500K-$5M+ (depends on scope)",
            expected_roi=(
                "150% through reduced infrastructure costs (30-40%), improved "
                "agility, and faster time-to-market"
            ),
        ),
    ),
    GapRule(
        gap_id="G019",
        description="No containerization or Kubernetes",
        layer=5,
        component_id="5.3",
        risk=3,
        business_impact=3,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Container Platform",
            description=(
                "Deploy Kubernetes (EKS, AKS, GKE) for container orchestration. "
                "Enables portability, auto-scaling, and efficient resource "
                "utilization. Start with new microservices."
            ),
            suggested_vendors=(
                "AWS EKS",
                "Azure AKS",
                "Google GKE",
                "Red Hat OpenShift",
                "Rancher",
            ),
            timeline="6-12 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "200% through improved resource utilization (40-60%), faster "
                "deployments, and reduced infrastructure costs"
            ),
        ),
    ),
    GapRule(
        gap_id="G020",
        description="No infrastructure as code (IaC)",
        layer=5,
        component_id="5.4",
        risk=3,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Infrastructure as Code (IaC)",
            description=(
                "Adopt Terraform or CloudFormation for infrastructure automation. "
                "Enables version control, repeatability, disaster recovery, and "
                "compliance-as-code."
            ),
            suggested_vendors=(
                "Terraform",
                "AWS CloudFormation",
                "Azure Bicep",
                "Pulumi",
                "Ansible",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "300% through 80% faster environment provisioning, reduced "
                "errors, and improved compliance"
            ),
        ),
    ),
    GapRule(
        gap_id="G021",
        description="No Zero Trust architecture",
        layer=6,
        component_id="6.1",
        risk=5,
        business_impact=5,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Zero Trust Security Model",
            description=(
                "Move from perimeter-based security to Zero Trust with "
                "identity-based access, micro-segmentation, and continuous "
                "verification. Critical for cloud and remote work."
            ),
            suggested_vendors=(
                "Okta",
                "Microsoft Entra (Azure AD)",
                "Zscaler",
                "Palo Alto Prisma",
                "CrowdStrike",
            ),
            timeline="12-24 months",
            estimated_cost="$500K-$2M",
            expected_roi=(
                "250% through reduced breach risk (60-70%), improved compliance, "
                "and secure remote access"
            ),
        ),
    ),
    GapRule(
        gap_id="G022",
        description="No SSO or federated identity",
        layer=6,
        component_id="6.2",
        risk=4,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Single Sign-On (SSO) & Identity Federation",
            description=(
                "Deploy SSO (Okta, Azure AD, Ping) for centralized authentication "
                "across all apps. Improves security, reduces password fatigue, "
                "and enables faster onboarding/offboarding."
            ),
            suggested_vendors=(
                "Okta",
                "Microsoft Entra ID",
                "Ping Identity",
                "Auth0",
                "OneLogin",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "400% through reduced help desk tickets (40%), improved security, "
                "and faster user provisioning"
            ),
        ),
    ),
    GapRule(
        gap_id="G023",
        description="No privileged access management (PAM)",
        layer=6,
        component_id="6.3",
        risk=5,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Privileged Access Management",
            description=(
                "Deploy PAM solution for securing admin accounts, session "
                "recording, and just-in-time access. Critical for SOX, PCI-DSS "
                "compliance and preventing insider threats."
            ),
            suggested_vendors=(
                "CyberArk",
                "BeyondTrust",
                "Delinea (Thycotic)",
                "HashiCorp Vault",
                "AWS Secrets Manager",
            ),
            timeline="4-8 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "250% through reduced breach risk from compromised admin accounts "
                "(80% of breaches) and compliance"
            ),
        ),
    ),
    GapRule(
        gap_id="G024",
        description="No multi-factor authentication (MFA)",
        layer=6,
        component_id="6.2",
        risk=5,
        business_impact=5,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Deploy Multi-Factor Authentication (MFA)",
            description=(
                "Critical security gap - implement MFA across all systems, "
                "starting with email, VPN, and admin access. Prevents 99.9% of "
                "automated attacks."
            ),
            suggested_vendors=(
                "Duo Security",
                "Okta",
                "Microsoft Authenticator",
                "Google Authenticator",
                "RSA SecurID",
            ),
            timeline="2-4 months",
            estimated_cost="$50K-$200K",
            expected_roi=(
                "500%+ through prevented breaches - average breach cost is $4.35M "
                "vs. $50K-$200K MFA investment"
            ),
        ),
    ),
    GapRule(
        gap_id="G025",
        description="No SIEM or security monitoring",
        layer=6,
        component_id="6.5",
        risk=5,
        business_impact=4,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Security Information & Event Management (SIEM)",
            description=(
                "Deploy SIEM for centralized log collection, threat detection, "
                "and security analytics. Critical for compliance (PCI-DSS, HIPAA) "
                "and detecting advanced threats."
            ),
            suggested_vendors=(
                "Splunk",
                "Microsoft Sentinel",
                "Palo Alto Cortex",
                "IBM QRadar",
                "Sumo Logic",
            ),
            timeline="6-12 months",
            estimated_cost="$300K-$1.5M",
            expected_roi=(
                "200% through faster threat detection (hours vs. days), "
                "compliance automation, and reduced breach impact"
            ),
        ),
    ),
    GapRule(
        gap_id="G026",
        description="No DLP or data encryption strategy",
        layer=6,
        component_id="6.6",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Data Loss Prevention (DLP) & Encryption",
            description=(
                "Deploy DLP solution to prevent sensitive data exfiltration via "
                "email, USB, cloud apps. Combine with encryption at rest and in "
                "transit for GDPR/CCPA compliance."
            ),
            suggested_vendors=(
                "Microsoft Purview DLP",
                "Symantec DLP",
                "Forcepoint DLP",
                "Digital Guardian",
                "Proofpoint",
            ),
            timeline="4-8 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "250% through prevented data breaches, compliance fines avoided, "
                "and intellectual property protection"
            ),
        ),
    ),
    GapRule(
        gap_id="G027",
        description="No vulnerability management program",
        layer=6,
        component_id="6.7",
        risk=4,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Vulnerability Management Program",
            description=(
                "Deploy vulnerability scanning (Tenable, Qualys) with automated "
                "patch management. Reduces attack surface and ensures compliance "
                "with PCI-DSS, NIST frameworks."
            ),
            suggested_vendors=(
                "Tenable.io",
                "Qualys",
                "Rapid7",
                "CrowdStrike Spotlight",
                "Microsoft Defender",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "300% through reduced breach risk (80% of breaches exploit known "
                "vulnerabilities) and compliance"
            ),
        ),
    ),
    GapRule(
        gap_id="G028",
        description="No CI/CD pipeline",
        layer=7,
        component_id="7.2",
        risk=4,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement CI/CD Pipeline",
            description=(
                "Deploy automated CI/CD (GitHub Actions, GitLab CI, Jenkins) for "
                "code testing, security scanning, and deployment automation. "
                "Reduces deployment time from days to minutes."
            ),
            suggested_vendors=(
                "GitHub Actions",
                "GitLab CI",
                "CircleCI",
                "Jenkins",
                "Azure DevOps Pipelines",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "400% through 90% faster deployments, 80% fewer production "
                "defects, and improved developer productivity"
            ),
        ),
    ),
    GapRule(
        gap_id="G029",
        description="Manual deployments (no automation)",
        layer=7,
        component_id="7.3",
        risk=4,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Automate Deployment Process",
            description=(
                "Implement deployment automation with blue/green or canary "
                "deployments, automated rollback, and infrastructure as code. "
                "Eliminates manual errors and downtime."
            ),
            suggested_vendors=(
                "Terraform",
                "Ansible",
                "Octopus Deploy",
                "Spinnaker",
                "AWS CodeDeploy",
            ),
            timeline="4-8 months",
            estimated_cost="$150K-$500K",
            expected_roi=(
                "300% through 95% reduction in deployment failures, zero-downtime "
                "deployments, and faster rollback"
            ),
        ),
    ),
    GapRule(
        gap_id="G030",
        description="No automated testing or test coverage <50%",
        layer=7,
        component_id="7.4",
        risk=3,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Test Automation Framework",
            description=(
                "Build automated testing pyramid (unit, integration, E2E) with "
                "test coverage monitoring. Target 80% code coverage for critical "
                "paths. Reduces regression testing from weeks to hours."
            ),
            suggested_vendors=(
                "Selenium",
                "Cypress",
                "Playwright",
                "JUnit/TestNG",
                "Postman",
                "SonarQube",
            ),
            timeline="4-8 months",
            estimated_cost="$150K-$600K",
            expected_roi=(
                "350% through 90% faster testing cycles, 70% fewer production "
                "defects, and improved release confidence"
            ),
        ),
    ),
    GapRule(
        gap_id="G031",
        description="No monitoring or observability platform",
        layer=7,
        component_id="7.5",
        risk=4,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Implement Full-Stack Observability Platform",
            description=(
                "Deploy observability solution (Datadog, New Relic, Dynatrace) "
                "for metrics, logs, traces, and APM. Enables proactive issue "
                "detection and <5 minute MTTR."
            ),
            suggested_vendors=(
                "Datadog",
                "New Relic",
                "Dynatrace",
                "Splunk",
                "Grafana + Prometheus",
            ),
            timeline="3-6 months",
            estimated_cost="$150K-$600K",
            expected_roi=(
                "300% through 80% faster incident resolution, reduced downtime "
                "(99.9% → 99.99%), and improved customer experience"
            ),
        ),
    ),
    GapRule(
        gap_id="G032",
        description="No incident management or on-call rotation",
        layer=7,
        component_id="7.6",
        risk=3,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement Incident Management Framework",
            description=(
                "Deploy incident management platform (PagerDuty, Opsgenie) with "
                "on-call rotations, escalation policies, and post-incident "
                "reviews. Reduces MTTR by 70%."
            ),
            suggested_vendors=(
                "PagerDuty",
                "Opsgenie",
                "VictorOps",
                "ServiceNow ITSM",
                "Jira Service Management",
            ),
            timeline="2-4 months",
            estimated_cost="$50K-$200K",
            expected_roi=(
                "400% through faster incident response (60 min → 15 min MTTR), "
                "reduced downtime, and improved SLAs"
            ),
        ),
    ),
    GapRule(
        gap_id="G033",
        description="No mobile apps or mobile-first strategy",
        layer=8,
        component_id="8.3",
        risk=3,
        business_impact=4,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Develop Mobile-First Strategy",
            description=(
                "Build native or React Native/Flutter mobile apps for key "
                "customer/employee workflows. Mobile commerce grows 25% YoY - "
                "critical for customer engagement."
            ),
            suggested_vendors=(
                "React Native",
                "Flutter",
                "Ionic",
                "Native iOS/Android",
                "Progressive Web Apps",
            ),
            timeline="6-12 months",
            estimated_cost="$200K-$1M",
            expected_roi=(
                "250% through increased customer engagement (+40%), mobile "
                "revenue growth, and competitive advantage"
            ),
        ),
    ),
    GapRule(
        gap_id="G034",
        description="No API documentation or developer portal",
        layer=4,
        component_id="4.2",
        risk=2,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Build API Developer Portal",
            description=(
                "Create self-service API portal with interactive documentation "
                "(OpenAPI/Swagger), sandbox environment, and API keys. "
                "Accelerates partner onboarding from weeks to hours."
            ),
            suggested_vendors=(
                "Stoplight",
                "ReadMe.io",
                "SwaggerHub",
                "Postman",
                "Apigee Portal",
            ),
            timeline="2-4 months",
            estimated_cost="$50K-$200K",
            expected_roi=(
                "300% through 90% faster partner onboarding, reduced support "
                "tickets, and increased API adoption"
            ),
        ),
    ),
    GapRule(
        gap_id="G035",
        description="No design system or UI component library",
        layer=8,
        component_id="8.1",
        risk=2,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Build Design System & Component Library",
            description=(
                "Create centralized design system (Figma + Storybook) with "
                "reusable components, design tokens, and accessibility "
                "guidelines. Accelerates UI development by 60%."
            ),
            suggested_vendors=(
                "Figma",
                "Storybook",
                "Material-UI",
                "Ant Design",
                "Chakra UI",
            ),
            timeline="4-8 months",
            estimated_cost="$150K-$500K",
            expected_roi=(
                "250% through 60% faster UI development, consistent brand, and "
                "reduced design debt"
            ),
        ),
    ),
    GapRule(
        gap_id="G036",
        description="Agile maturity <3 or still waterfall",
        layer=9,
        component_id="9.1",
        risk=3,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Agile Transformation Program",
            description=(
                "Transition from waterfall to agile/SAFe with cross-functional "
                "teams, 2-week sprints, and continuous delivery. Improves "
                "time-to-market by 50%."
            ),
            suggested_vendors=(
                "Scaled Agile (SAFe)",
                "Scrum.org",
                "Atlassian Jira/Confluence",
                "Azure DevOps",
                "Version One",
            ),
            timeline="6-12 months",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "200% through 50% faster feature delivery, improved quality, and "
                "better stakeholder satisfaction"
            ),
        ),
    ),
    GapRule(
        gap_id="G037",
        description="No change management or communication plan",
        layer=9,
        component_id="9.2",
        risk=3,
        business_impact=4,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Establish Change Management Framework",
            description=(
                "Implement structured change management (Prosci ADKAR, Kotter) "
                "with stakeholder engagement, training programs, and adoption "
                "metrics. Increases project success rate from 35% to 75%."
            ),
            suggested_vendors=(
                "Prosci",
                "Kotter Consulting",
                "McKinsey Change Management",
                "WalkMe",
                "Pendo",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "300% through 2x higher adoption rates, reduced resistance, and "
                "faster ROI realization"
            ),
        ),
    ),
    GapRule(
        gap_id="G038",
        description="No technical debt management or refactoring plan",
        layer=9,
        component_id="9.4",
        risk=4,
        business_impact=3,
        remediation_cost=3,
        recommendation=Recommendation(
            title="Technical Debt Reduction Program",
            description=(
                "Establish tech debt tracking with SonarQube, allocate 20% sprint "
                "capacity for refactoring, and create modernization roadmap. "
                "Prevents compound interest on tech debt."
            ),
            suggested_vendors=(
                "SonarQube",
                "CodeScene",
                "NDepend",
                "Structure101",
                "Understand",
            ),
            timeline="Ongoing (6-18 month roadmap)",
            estimated_cost="$200K-$800K",
            expected_roi=(
                "200% through 40% faster feature development, reduced bugs "
                "(-50%), and improved maintainability"
            ),
        ),
    ),
    GapRule(
        gap_id="G039",
        description="No disaster recovery or business continuity plan",
        layer=5,
        component_id="5.6",
        risk=5,
        business_impact=5,
        remediation_cost=4,
        recommendation=Recommendation(
            title="Implement Disaster Recovery & Business Continuity",
            description=(
                "Build DR plan with RTO <4 hours, RPO <1 hour. Implement "
                "multi-region cloud deployment, automated backups, and annual DR "
                "testing. Critical for business resilience."
            ),
            suggested_vendors=(
                "AWS Backup",
                "Azure Site Recovery",
                "Veeam",
                "Zerto",
                "Druva",
            ),
            timeline="6-12 months",
            estimated_cost="$300K-$1.5M",
            expected_roi=(
                "250% through business continuity assurance - average downtime "
                "cost is $300K/hour vs. DR investment"
            ),
        ),
    ),
    GapRule(
        gap_id="G040",
        description="No cost optimization or FinOps practice",
        layer=5,
        component_id="5.7",
        risk=3,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement FinOps & Cloud Cost Optimization",
            description=(
                "Deploy cloud cost management platform (CloudHealth, Kubecost) "
                "with automated rightsizing, reserved instances, and "
                "showback/chargeback. Typical 30% savings."
            ),
            suggested_vendors=(
                "CloudHealth",
                "Kubecost",
                "Spot.io",
                "AWS Cost Explorer",
                "Azure Cost Management",
            ),
            timeline="3-6 months",
            estimated_cost="$100K-$400K",
            expected_roi=(
                "400%+ through 30-40% cloud cost reduction - typical $1M cloud "
                "spend → $300K-$400K annual savings"
            ),
        ),
    ),
    GapRule(
        gap_id="G041",
        description="No API versioning or backward compatibility strategy",
        layer=4,
        component_id="4.2",
        risk=3,
        business_impact=3,
        remediation_cost=2,
        recommendation=Recommendation(
            title="Implement API Versioning & Lifecycle Management",
            description=(
                "Establish API versioning standards (semantic versioning), "
                "deprecation policies, and backward compatibility testing. "
                "Prevents breaking changes that disrupt partners/apps."
            ),
            suggested_vendors=(
                "Apigee",
                "Kong",
                "AWS API Gateway",
                "Postman",
                "SwaggerHub",
            ),
            timeline="2-4 months",
            estimated_cost="$75K-$250K",
            expected_roi=(
                "250% through reduced integration breakages (90% reduction), "
                "improved partner satisfaction, and faster API evolution"
            ),
        ),
    ),
)

GAP_RULES_BY_ID: dict[str, GapRule] = {rule.gap_id: rule for rule in GAP_RULES}


def get_gap_by_id(gap_id: str) -> GapRule | None:
    """Return the rule for a gap id, or None when the id is not catalogued."""
    return GAP_RULES_BY_ID.get(gap_id)


def get_gaps_by_layer(layer_id: int) -> list[GapRule]:
    """Return catalog rules belonging to a layer, in catalog order."""
    return [rule for rule in GAP_RULES if rule.layer == layer_id]


def get_gaps_by_component(component_id: str) -> list[GapRule]:
    """Return catalog rules attached to a component, in catalog order."""
    return [rule for rule in GAP_RULES if rule.component_id == component_id]


def get_gaps_by_priority(priority_band: PriorityBand) -> list[GapRule]:
    """Return catalog rules whose derived band equals priority_band."""
    return [rule for rule in GAP_RULES if rule.priority_band == priority_band]


def get_top_gaps(count: int = 10) -> list[GapRule]:
    """Return the count highest-priority rules; ties keep catalog order."""
    return sorted(GAP_RULES, key=lambda rule: rule.priority_score, reverse=True)[:count]


def gap_statistics() -> dict[str, object]:
    """Summarise the catalog by priority band and by layer.

    Returns:
        Dict with keys total, by_priority (band -> count) and
        by_layer (layer id -> count, every layer 0-9 present).
    """
    by_priority: dict[str, int] = {"Critical": 0, "High": 0, "Medium": 0, "Low": 0}
    by_layer: dict[int, int] = {layer_id: 0 for layer_id in range(10)}
    for rule in GAP_RULES:
        by_priority[rule.priority_band] += 1
        by_layer[rule.layer] = by_layer.get(rule.layer, 0) + 1
    return {
        "total": len(GAP_RULES),
        "by_priority": by_priority,
        "by_layer": by_layer,
    }
