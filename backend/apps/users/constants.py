"""
Catalogue des rôles et des permissions du cabinet
"""

ROLE_ADMIN = 'ADMIN'
ROLE_CHEF_EQUIPE = 'CHEF_EQUIPE'
ROLE_COLLABORATEUR = 'COLLABORATEUR'
ROLE_ASSISTANT = 'ASSISTANT'

ROLES = [ROLE_ADMIN, ROLE_CHEF_EQUIPE, ROLE_COLLABORATEUR, ROLE_ASSISTANT]

PERM_CLIENTS_VIEW = 'clients.view'
PERM_CLIENTS_EDIT = 'clients.edit'
PERM_PORTFOLIOS_VIEW = 'portfolios.view'
PERM_PORTFOLIOS_EDIT = 'portfolios.edit'
PERM_TASKS_MANAGE = 'tasks.manage'
PERM_TIME_APPROVE = 'time.approve'
PERM_REQUESTS_VIEW = 'requests.view'
PERM_REQUESTS_MANAGE = 'requests.manage'
PERM_EXPORTS_VIEW = 'exports.view'
PERM_USERS_EDIT = 'users.edit'
PERM_USERS_RATE_SET = 'users.rate.set'

PERMISSIONS = [
    (PERM_CLIENTS_VIEW, 'Consulter les clients'),
    (PERM_CLIENTS_EDIT, 'Créer et modifier les clients'),
    (PERM_PORTFOLIOS_VIEW, 'Consulter les portefeuilles'),
    (PERM_PORTFOLIOS_EDIT, 'Créer et modifier les portefeuilles'),
    (PERM_TASKS_MANAGE, 'Gérer les tâches'),
    (PERM_TIME_APPROVE, 'Valider les temps passés'),
    (PERM_REQUESTS_VIEW, 'Consulter les demandes clients'),
    (PERM_REQUESTS_MANAGE, 'Gérer les demandes clients'),
    (PERM_EXPORTS_VIEW, 'Rapports et exports'),
    (PERM_USERS_EDIT, 'Gérer les utilisateurs et les rôles'),
    (PERM_USERS_RATE_SET, 'Définir les taux horaires'),
]

# Matrice par défaut rôle -> permissions (ADMIN reçoit tout)
DEFAULT_ROLE_PERMISSIONS = {
    ROLE_ADMIN: [code for code, _ in PERMISSIONS],
    ROLE_CHEF_EQUIPE: [
        PERM_CLIENTS_VIEW,
        PERM_CLIENTS_EDIT,
        PERM_TASKS_MANAGE,
        PERM_REQUESTS_MANAGE,
        PERM_EXPORTS_VIEW,
    ],
    ROLE_COLLABORATEUR: [
        PERM_CLIENTS_VIEW,
        PERM_TASKS_MANAGE,
    ],
    ROLE_ASSISTANT: [
        PERM_CLIENTS_VIEW,
        PERM_REQUESTS_MANAGE,
    ],
}
